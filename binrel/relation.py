'''Binary relations between two finite sets, and the structural properties such relations may enjoy'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import (
    AbstractSet,
    Any,
    Callable,
    Generic,
    Hashable,
    Iterator,
    Optional,
    TypeVar,
)

import numpy as np
import networkx as nx

from .arraytypes import Shape, N, M, ZeroOneMatrix, as_zero_one_matrix
from .matrices import boolean_product, incidence_matrix, matrix_pairs, warshall_closure
from .mutils.comparison import TotallyOrderable, ordered_elements
from .mutils.iteration import first_components, second_components, has_duplicates, successors
from .mutils.setutils import (
    cartesian_product,
    converse_pairs,
    diagonal_pairs,
    is_finite_set,
    is_ordered_pair,
    off_diagonal,
)


# Element typehints
A = TypeVar('A', bound=Hashable) # elements of the domain
B = TypeVar('B', bound=Hashable) # elements of the codomain
C = TypeVar('C', bound=Hashable) # elements of the codomain of a composed relation
Pair = tuple[A, B]

# Custom Exceptions
class RelationError(Exception):
    '''Raised when Relation-related errors are encountered'''
    pass

class RelationTypeError(RelationError, TypeError):
    '''Raised when a value is not of the kind a Relation expects (e.g. a non-set, or a non-pair)'''
    pass

class NotOnOneSetError(RelationTypeError):
    '''Raised when a property only defined for relations on a single set is requested of a relation between two distinct sets'''
    pass

class InvalidRelationError(RelationError, ValueError):
    '''Raised when a collection of pairs does not lie within the Cartesian product of the sets a Relation is taken over'''
    pass


class Relation(Generic[A, B]):
    '''
    A binary relation from a set A (the domain) to a set B (the codomain),
    i.e. a set of ordered pairs (a, b) which is a subset of the Cartesian product A x B

    When no codomain is given, the relation is taken to be a relation "on" the domain (i.e. codomain = domain)

    The mapping is validated against the domain and codomain at the time it is assigned;
    reassigning the domain or codomain afterwards does NOT re-validate the mapping.
    Reassign the mapping after changing either set if consistency is required (see Relation.is_consistent)
    '''
    def __init__(
        self,
        domain : AbstractSet[A],
        codomain : Optional[AbstractSet[B]]=None,
        mapping : Optional[AbstractSet[Pair]]=None,
    ) -> None:
        self.domain = domain
        self.codomain = domain if (codomain is None) else codomain

        self._mapping : set[Pair] = set()
        if mapping is not None:
            self.assign_mapping(mapping)

    # Validation
    @staticmethod
    def _assert_set(obj : Any, name : str) -> None:
        '''Raise RelationTypeError if an object is not a finite set'''
        if not is_finite_set(obj):
            raise RelationTypeError(f'Relation {name} must be a set, not {type(obj).__name__}')

    def _assert_on_one_set(self) -> None:
        '''Raise NotOnOneSetError if this relation is not a relation on a single set'''
        if not self.is_on_one_set:
            raise NotOnOneSetError('Property is only defined for relations whose domain and codomain are equal')

    def _assert_consistent(self) -> None:
        '''Raise InvalidRelationError if the mapping has pairs outside the current domain and codomain'''
        if not self.is_consistent:
            raise InvalidRelationError('Mapping contains pairs outside of the current domain and codomain; reassign the mapping before deriving new relations from it')

    # Underlying sets and mapping
    @property
    def domain(self) -> frozenset[A]:
        '''The set from which the first entry of each pair is drawn'''
        return self._domain

    @domain.setter
    def domain(self, new_domain : AbstractSet[A]) -> None:
        self._assert_set(new_domain, 'domain')
        self._domain = frozenset(new_domain)
        self._warn_if_inconsistent()

    @property
    def codomain(self) -> frozenset[B]:
        '''The set from which the second entry of each pair is drawn'''
        return self._codomain

    @codomain.setter
    def codomain(self, new_codomain : AbstractSet[B]) -> None:
        self._assert_set(new_codomain, 'codomain')
        self._codomain = frozenset(new_codomain)
        self._warn_if_inconsistent()

    @property
    def mapping(self) -> frozenset[Pair]:
        '''The set of ordered pairs which make up the relation'''
        return frozenset(self._mapping)

    @mapping.setter
    def mapping(self, new_mapping : AbstractSet[Pair]) -> None:
        self.assign_mapping(new_mapping)

    def assign_mapping(self, new_mapping : AbstractSet[Pair]) -> frozenset[Pair]:
        '''
        Replace the pairs of this relation with a new set of ordered pairs, returning the new mapping

        Raises RelationTypeError if the mapping is not a set or contains anything other than 2-tuples,
        and InvalidRelationError if any pair lies outside the Cartesian product of the domain and codomain.
        The current mapping is left untouched if either error is raised
        '''
        self._assert_set(new_mapping, 'mapping')
        for pair in new_mapping:
            if not is_ordered_pair(pair):
                raise RelationTypeError(f'Relation mapping must consist of ordered pairs (2-tuples), found {pair!r}')

        if not (new_mapping <= cartesian_product(self.domain, self.codomain)):
            raise InvalidRelationError('Relation mapping is not a subset of the Cartesian product of the domain and codomain')

        self._mapping = set(new_mapping)
        LOGGER.debug(f'Assigned mapping with {len(self._mapping)} pairs to {self!r}')

        return self.mapping

    def insert(self, a : A, b : B) -> None:
        '''
        Add the ordered pair (a, b) to this relation
        Raises InvalidRelationError if "a" is not in the domain or "b" is not in the codomain
        '''
        if a not in self.domain:
            raise InvalidRelationError(f'Element {a!r} does not belong to the domain of the relation')
        if b not in self.codomain:
            raise InvalidRelationError(f'Element {b!r} does not belong to the codomain of the relation')

        self._mapping.add((a, b)) # no-op if pair is already present
        LOGGER.debug(f'Inserted pair {(a, b)!r}')

    @property
    def is_consistent(self) -> bool:
        '''Whether the current mapping still lies within the Cartesian product of the current domain and codomain'''
        return all(
            (a in self.domain) and (b in self.codomain)
                for (a, b) in self._mapping
        )

    def _warn_if_inconsistent(self) -> None:
        '''Flag reassignments of the underlying sets which strand existing pairs outside of them'''
        if hasattr(self, '_mapping') and not self.is_consistent:
            LOGGER.warning('Reassigned set no longer contains every element of the existing mapping; reassign the mapping to restore consistency')

    # Collection protocol
    def __iter__(self) -> Iterator[Pair]:
        '''
        Generates every pair in the relation exactly once, in no particular order
        Iterates over an O(n) snapshot of the mapping taken on the first call to next(), so inserting during iteration is safe
        '''
        yield from tuple(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, pair : Any) -> bool:
        return pair in self._mapping

    def __eq__(self, other : Any) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return (
            (self.domain == other.domain)
            and (self.codomain == other.codomain)
            and (self._mapping == other._mapping)
        )

    __hash__ = None # mutable

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(|domain|={len(self.domain)}, |codomain|={len(self.codomain)}, num_pairs={len(self)})'

    def copy(self) -> 'Relation[A, B]':
        '''
        Create an independent Relation with the same domain, codomain, and mapping as this one
        Unlike converse(), compose(), and transitive_closure(), copies inconsistent relations as-is
        '''
        new_relation = self.__class__(self.domain, self.codomain)
        new_relation._mapping = set(self._mapping) # bypass re-validation, which would fail for inconsistent relations

        return new_relation

    # Function-like properties
    @property
    def is_function(self) -> bool:
        '''Whether each element of the domain is related to at most one element of the codomain'''
        return not has_duplicates(first_components(self._mapping))

    @property
    def is_onto(self) -> bool:
        '''Whether the relation is a function which reaches every element of the codomain'''
        return self.is_function and (set(second_components(self._mapping)) == self.codomain)
    is_surjective = is_surjection = is_onto

    @property
    def is_one_to_one(self) -> bool:
        '''Whether the relation is a function which never sends two distinct elements to the same element'''
        return self.is_function and not has_duplicates(second_components(self._mapping))
    is_injective = is_injection = is_one_to_one

    @property
    def is_bijection(self) -> bool:
        '''Whether the relation is both one-to-one and onto'''
        return self.is_onto and self.is_one_to_one
    is_bijective = is_one_to_one_correspondence = is_bijection

    # Properties of relations on a single set
    @property
    def is_on_one_set(self) -> bool:
        '''Whether the domain and codomain of the relation are the same set'''
        return self.domain == self.codomain

    def reflexive_closure(self) -> frozenset[tuple[A, A]]:
        '''The pairs (a, a) for every element "a" of the underlying set'''
        self._assert_on_one_set()
        return diagonal_pairs(self.domain)

    def symmetric_closure(self) -> frozenset[Pair]:
        '''
        The pairs which must be added to the mapping to make it symmetric,
        i.e. the reverse (b, a) of every pair (a, b) whose reverse is not already present
        '''
        self._assert_on_one_set()
        return converse_pairs(self._mapping) - self._mapping

    def transitive_closure(self) -> frozenset[Pair]:
        '''
        The smallest transitive set of pairs containing the mapping,
        computed by Warshall's algorithm on the adjacency matrix of the relation

        Raises InvalidRelationError if the mapping is inconsistent with the current domain (see Relation.is_consistent)
        '''
        self._assert_on_one_set()
        self._assert_consistent()
        elements = tuple(self.domain) # any fixed order will do; need not be sorted
        adjacency = incidence_matrix(self._mapping, elements, elements, dtype=bool)

        return matrix_pairs(warshall_closure(adjacency), elements, elements)

    @property
    def is_reflexive(self) -> bool:
        '''Whether every element is related to itself'''
        return self.reflexive_closure() <= self._mapping

    @property
    def is_irreflexive(self) -> bool:
        '''Whether no element is related to itself'''
        self._assert_on_one_set()
        return not any(a == b for (a, b) in self._mapping)

    @property
    def is_symmetric(self) -> bool:
        '''Whether (b, a) is in the relation whenever (a, b) is'''
        self._assert_on_one_set()
        return converse_pairs(self._mapping) == self._mapping

    @property
    def is_antisymmetric(self) -> bool:
        '''Whether (a, b) and (b, a) are never both in the relation for distinct a and b'''
        self._assert_on_one_set()
        return not any(
            (b, a) in self._mapping
                for (a, b) in off_diagonal(self._mapping)
        )

    @property
    def is_asymmetric(self) -> bool:
        '''Whether (b, a) is never in the relation when (a, b) is; in particular, no element may be related to itself'''
        self._assert_on_one_set()
        return self._mapping.isdisjoint(converse_pairs(self._mapping))

    @property
    def is_transitive(self) -> bool:
        '''Whether (a, c) is in the relation whenever both (a, b) and (b, c) are'''
        self._assert_on_one_set()
        adjacency = successors(self._mapping)
        for (a, b) in self._mapping:
            if not adjacency.get(b, set()) <= adjacency[a]:
                return False

        return True

    @property
    def is_equivalence_relation(self) -> bool:
        '''Whether the relation is reflexive, symmetric, and transitive'''
        return self.is_reflexive and self.is_symmetric and self.is_transitive

    @property
    def is_partial_order(self) -> bool:
        '''Whether the relation is reflexive, antisymmetric, and transitive'''
        return self.is_reflexive and self.is_antisymmetric and self.is_transitive

    # Derived relations
    def converse(self) -> 'Relation[B, A]':
        '''
        The relation from the codomain to the domain obtained by reversing every pair
        Raises InvalidRelationError if the mapping is inconsistent with the current domain and codomain
        '''
        self._assert_consistent()
        return self.__class__(self.codomain, self.domain, converse_pairs(self._mapping))
    inverse = converse

    def compose(self, other : 'Relation[B, C]') -> 'Relation[A, C]':
        '''
        The composite relation containing (a, c) whenever (a, b) is in this relation and (b, c) is in the other,
        for some intermediate element "b". Traditionally written as "other o self"

        Raises RelationTypeError if other is not a Relation,
        and InvalidRelationError if the codomain of this relation differs from the domain of the other,
        or if either relation's mapping is inconsistent with its current domain and codomain
        '''
        if not isinstance(other, Relation):
            raise RelationTypeError(f'Can only compose with another Relation, not {type(other).__name__}')
        if self.codomain != other.domain:
            raise InvalidRelationError('Codomain of relation must match domain of the relation it is composed with')
        self._assert_consistent()
        other._assert_consistent()

        rows, middle, cols = tuple(self.domain), tuple(self.codomain), tuple(other.codomain)
        composite = boolean_product(
            incidence_matrix(self._mapping, rows, middle),
            incidence_matrix(other._mapping, middle, cols),
        )
        return self.__class__(self.domain, other.codomain, matrix_pairs(composite, rows, cols))

    # Matrix and graph representations
    def to_matrix(
        self,
        dtype : type=int,
        key : Optional[Callable[[Any], TotallyOrderable]]=None,
    ) -> ZeroOneMatrix:
        '''
        The zero-one matrix of the relation, whose rows and columns are indexed by the
        domain and codomain, respectively, each sorted into ascending order

        Elements of each set MUST be mutually comparable (or be made so by "key");
        the TypeError raised by sorting otherwise is not intercepted
        '''
        return incidence_matrix(
            self._mapping,
            ordered_elements(self.domain, key=key),
            ordered_elements(self.codomain, key=key),
            dtype=dtype,
        )

    @classmethod
    def from_matrix(
        cls,
        matrix : np.ndarray[Shape[N, M], int],
        domain : AbstractSet[A],
        codomain : Optional[AbstractSet[B]]=None,
        key : Optional[Callable[[Any], TotallyOrderable]]=None,
    ) -> 'Relation[A, B]':
        '''
        Inverse of Relation.to_matrix(); build a relation from a zero-one matrix whose
        rows and columns are indexed by the sorted domain and codomain, respectively
        '''
        if codomain is None:
            codomain = domain
        cls._assert_set(domain, 'domain')
        cls._assert_set(codomain, 'codomain')

        rows = ordered_elements(domain, key=key)
        cols = ordered_elements(codomain, key=key)
        try:
            bool_matrix = as_zero_one_matrix(matrix, shape=(len(rows), len(cols)))
        except TypeError as err:
            raise RelationTypeError(str(err)) from err

        return cls(domain, codomain, matrix_pairs(bool_matrix, rows, cols))

    def to_digraph(self) -> nx.DiGraph:
        '''
        Directed graph whose nodes are the elements of the domain and codomain,
        with an edge a -> b for each pair (a, b) in the relation
        '''
        digraph = nx.DiGraph()
        digraph.add_nodes_from(self.domain)
        digraph.add_nodes_from(self.codomain)
        digraph.add_edges_from(self._mapping)

        return digraph
