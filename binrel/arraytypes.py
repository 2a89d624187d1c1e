'''Typehints and shape enforcement for numpy arrays'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import TypeVar

import numpy as np


# Numpy array type annotations
Shape = tuple # the shape field of a numpy array
DType = TypeVar('DType', bound=np.generic) # the data type of a numpy array

M = TypeVar('M', bound=int) # typehint the size of a given dimension
N = TypeVar('N', bound=int) # typehint the size of a given dimension
P = TypeVar('P', bound=int) # typehint the size of a given dimension

ArrayNxN = np.ndarray[Shape[N, N], DType]
ArrayNxM = np.ndarray[Shape[N, M], DType]
ArrayMxP = np.ndarray[Shape[M, P], DType]
ArrayNxP = np.ndarray[Shape[N, P], DType]

ZeroOneMatrix = np.ndarray[Shape[N, M], int] # entries are exclusively 0 or 1


# matrix validation
def is_zero_one(matrix : np.ndarray) -> bool:
    '''Whether every entry of an array is either 0 or 1'''
    return bool(np.isin(matrix, (0, 1)).all())

def as_zero_one_matrix(
    matrixlike : np.ndarray[Shape[N, M], DType],
    shape : Shape[N, M],
) -> np.ndarray[Shape[N, M], bool]:
    '''Interpret array as an NxM zero-one matrix, returned as a boolean array'''
    if not isinstance(matrixlike, np.ndarray): # TODO: accept nested lists once non-rectangular input is rejected cleanly
        raise TypeError(f'Matrixlike must be a numpy array, not {type(matrixlike)}')
    if matrixlike.shape != tuple(shape):
        raise TypeError(f'Expected {shape[0]}x{shape[1]} matrix, received array of shape {matrixlike.shape} instead')
    if not is_zero_one(matrixlike):
        raise TypeError('Matrix entries must be exclusively 0 or 1')

    return matrixlike.astype(bool)
