'''Boolean (zero-one) matrix representations of relations, and the algorithms which act upon them'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Hashable, Iterable, Sequence, TypeVar

import numpy as np

from .arraytypes import Shape, N, M, ArrayNxN, ArrayNxM, ArrayMxP, ArrayNxP, ZeroOneMatrix
from .mutils.comparison import index_lookup

A = TypeVar('A', bound=Hashable)
B = TypeVar('B', bound=Hashable)


# conversion between pairs and matrices
def incidence_matrix(
    pairs : Iterable[tuple[A, B]],
    row_elements : Sequence[A],
    col_elements : Sequence[B],
    dtype : type=int,
) -> ZeroOneMatrix:
    '''
    Build the zero-one matrix whose (i, j) entry is 1 if and only if
    the pair (row_elements[i], col_elements[j]) appears among the given pairs

    Pairs whose entries are not among the row or column elements are ignored
    '''
    row_idxs = index_lookup(row_elements)
    col_idxs = index_lookup(col_elements)

    matrix = np.zeros((len(row_elements), len(col_elements)), dtype=dtype)
    for (a, b) in pairs:
        if (a in row_idxs) and (b in col_idxs):
            matrix[row_idxs[a], col_idxs[b]] = 1

    return matrix

def matrix_pairs(
    matrix : np.ndarray[Shape[N, M], int],
    row_elements : Sequence[A],
    col_elements : Sequence[B],
) -> frozenset[tuple[A, B]]:
    '''Inverse of incidence_matrix(); reads off the pair of row and column elements for every nonzero entry'''
    return frozenset(
        (row_elements[i], col_elements[j])
            for (i, j) in zip(*np.nonzero(matrix))
    )

# boolean matrix algebra
def boolean_product(
    matrix_1 : ArrayNxM,
    matrix_2 : ArrayMxP,
) -> ArrayNxP:
    '''
    Boolean matrix product of an NxM and an MxP matrix, where sum is replaced by OR and product by AND
    Yields the matrix of the composite relation when applied to two incidence matrices
    '''
    # NOTE: numpy will raise Exception (as desired) when inner dimensions don't match
    return (matrix_1.astype(bool).astype(int) @ matrix_2.astype(bool).astype(int)) > 0

def warshall_closure(adjacency : ArrayNxN) -> np.ndarray[Shape[N, N], bool]:
    '''
    Transitive closure of a square boolean adjacency matrix, via Warshall's algorithm

    After the k-th pass, entry (i, j) is True exactly when j is reachable from i
    along a path whose intermediate nodes all lie among the first k nodes
    '''
    (n_rows, n_cols) = adjacency.shape # implicitly assert 2-dimensionality
    if n_rows != n_cols:
        raise ValueError(f'Transitive closure requires a square adjacency matrix, not one of shape {adjacency.shape}')

    closure = np.array(adjacency, dtype=bool, copy=True) # preserve original matrix
    for k in range(n_rows):
        closure |= np.outer(closure[:, k], closure[k, :]) # i -> k -> j implies i -> j
    LOGGER.debug(f'Computed Warshall closure of {n_rows}x{n_cols} adjacency matrix')

    return closure
