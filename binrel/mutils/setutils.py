'''
Utilities related to generic set-theoretic operations,
including products, relations, and mappings between sets
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import AbstractSet, Any, Hashable, Iterable, TypeVar
from itertools import product as cartesian

A = TypeVar('A', bound=Hashable)
B = TypeVar('B', bound=Hashable)
Pair = tuple[A, B]


def is_finite_set(obj : Any) -> bool:
    '''Whether an object is a set-like container (set, frozenset, dict key view, etc)'''
    return isinstance(obj, AbstractSet)

def is_ordered_pair(obj : Any) -> bool:
    '''Whether an object is an ordered pair, i.e. a tuple with exactly 2 entries'''
    return isinstance(obj, tuple) and (len(obj) == 2)

def cartesian_product(set_a : AbstractSet[A], set_b : AbstractSet[B]) -> frozenset[Pair]:
    '''The set of all ordered pairs (a, b) with a drawn from set_a and b drawn from set_b'''
    return frozenset(cartesian(set_a, set_b))

def converse_pairs(pairs : Iterable[Pair]) -> frozenset[Pair]:
    '''Reverse every pair in a collection of ordered pairs, i.e. (a, b) -> (b, a)'''
    return frozenset((b, a) for (a, b) in pairs)

def diagonal_pairs(elements : Iterable[A]) -> frozenset[tuple[A, A]]:
    '''The identity relation on a collection of elements, i.e. every element paired with itself'''
    return frozenset((elem, elem) for elem in elements)

def off_diagonal(pairs : Iterable[Pair]) -> frozenset[Pair]:
    '''All pairs from a collection whose two entries differ'''
    return frozenset(pair for pair in pairs if pair[0] != pair[1])
