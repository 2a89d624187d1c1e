'''Defines interfaces and Protocols for ordering the elements of the sets a relation is taken over'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, Callable, Iterable, Optional, Protocol, Self, TypeVar, runtime_checkable
T = TypeVar('T')


@runtime_checkable
class TotallyOrderable(Protocol):
    '''
    Objects which admit a total order amongst one another via "<"
    Such objects can be used to index the rows and columns of an incidence matrix
    '''
    def __lt__(self, other : Self) -> bool:
        ...

def ordered_elements(
    elements : Iterable[T],
    key : Optional[Callable[[T], Any]]=None,
) -> tuple[T, ...]:
    '''
    Arrange a collection of elements into a deterministic, ascending total order

    Elements MUST be mutually comparable (or be made so by "key");
    the TypeError raised by Python when elements cannot be compared is deliberately left uncaught
    '''
    return tuple(sorted(elements, key=key))

def index_lookup(ordered : Iterable[T]) -> dict[T, int]:
    '''Mapping from each element of an ordered collection to its position in that collection'''
    return {
        elem : idx
            for idx, elem in enumerate(ordered)
    }
