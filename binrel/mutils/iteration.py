'''Tools for simplifying iteration over collections of pairs'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import (
    Generator,
    Hashable,
    Iterable,
    Mapping,
    TypeVar,
)
T = TypeVar('T', bound=Hashable)
S = TypeVar('S', bound=Hashable)

from collections import defaultdict


def first_components(pairs : Iterable[tuple[T, S]]) -> Generator[T, None, None]:
    '''Generates the first entry of each pair, with repetition (i.e. as a multiset)'''
    for first, _ in pairs:
        yield first

def second_components(pairs : Iterable[tuple[T, S]]) -> Generator[S, None, None]:
    '''Generates the second entry of each pair, with repetition (i.e. as a multiset)'''
    for _, second in pairs:
        yield second

def has_duplicates(items : Iterable[T]) -> bool:
    '''
    Whether any item in a collection occurs more than once
    Stops as soon as the first repeat is encountered
    '''
    seen : set[T] = set()
    for item in items:
        if item in seen:
            return True
        seen.add(item)

    return False

def successors(pairs : Iterable[tuple[T, S]]) -> Mapping[T, set[S]]:
    '''
    Mapping from the first entry of each pair to all second entries it is paired with
    Equivalent to the adjacency list of the directed graph the pairs represent
    '''
    adjacency = defaultdict(set)
    for first, second in pairs:
        adjacency[first].add(second)

    return dict(adjacency) # downconvert to avoid accidental insertion on lookup
