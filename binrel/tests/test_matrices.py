'''Unit tests for zero-one matrix representations of relations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest

import numpy as np

from binrel.relation import Relation, RelationTypeError
from binrel.arraytypes import is_zero_one, as_zero_one_matrix
from binrel.matrices import (
    boolean_product,
    incidence_matrix,
    matrix_pairs,
    warshall_closure,
)


LETTERS = {'a', 'b', 'c', 'd'}
NUMBERS = {1, 2, 3, 4}

# Relation.to_matrix() tests
def test_to_matrix_single_row() -> None:
    '''Test that a relation on a single domain element produces a single row of ones'''
    rel = Relation(LETTERS, NUMBERS, {('a', 1), ('a', 2), ('a', 3), ('a', 4)})
    expected = np.array([
        [1, 1, 1, 1],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    assert np.array_equal(rel.to_matrix(), expected)

def test_to_matrix_sorted_indexing() -> None:
    '''Test that rows and columns are indexed by the sorted domain and codomain, respectively'''
    rel = Relation({'c', 'a', 'b'}, {30, 10, 20}, {('c', 10), ('a', 30)})
    expected = np.array([
        [0, 0, 1], # a
        [0, 0, 0], # b
        [1, 0, 0], # c
    ])
    assert np.array_equal(rel.to_matrix(), expected)

def test_to_matrix_shape() -> None:
    '''Test that the matrix has one row per domain element and one column per codomain element'''
    rel = Relation({'a', 'b'}, {1, 2, 3})
    matrix = rel.to_matrix()
    assert matrix.shape == (2, 3) and not matrix.any()

def test_to_matrix_identity() -> None:
    '''Test that the reflexive closure of a relation on a set corresponds to the identity matrix'''
    rel = Relation(NUMBERS)
    rel.mapping = rel.reflexive_closure()
    assert np.array_equal(rel.to_matrix(), np.eye(4, dtype=int))

def test_to_matrix_dtype() -> None:
    '''Test that the element type of the matrix can be specified'''
    rel = Relation(NUMBERS, mapping={(1, 2)})
    assert rel.to_matrix(dtype=bool).dtype == bool
    assert rel.to_matrix().dtype.kind == 'i'

def test_to_matrix_key() -> None:
    '''Test that a sort key can be provided to order rows and columns'''
    rel = Relation(NUMBERS, mapping={(4, 1)})
    matrix = rel.to_matrix(key=lambda n : -n) # descending order
    assert matrix[0, 3] == 1 and matrix.sum() == 1

def test_to_matrix_unorderable() -> None:
    '''Test that elements which cannot be ordered prevent construction of a matrix'''
    rel = Relation({1, 'one'}, mapping={(1, 'one')})
    with pytest.raises(TypeError):
        _ = rel.to_matrix()

def test_to_matrix_symmetric_relation_symmetric_matrix() -> None:
    '''Test that the matrix of a symmetric relation is symmetric'''
    rel = Relation(NUMBERS, mapping={(1, 2), (2, 1), (3, 4), (4, 3), (2, 2)})
    matrix = rel.to_matrix()
    assert np.array_equal(matrix, matrix.T)

# Relation.from_matrix() tests
def test_from_matrix_inverts_to_matrix() -> None:
    '''Test that a relation can be recovered from its matrix'''
    rel = Relation(LETTERS, NUMBERS, {('a', 2), ('b', 2), ('d', 1), ('d', 4)})
    assert Relation.from_matrix(rel.to_matrix(), LETTERS, NUMBERS) == rel

def test_from_matrix_on_one_set() -> None:
    '''Test that omitting the codomain reads the matrix as a relation on a single set'''
    rel = Relation.from_matrix(np.eye(3, dtype=int), {'x', 'y', 'z'})
    assert rel.is_on_one_set and rel.is_equivalence_relation

@pytest.mark.parametrize(
    'matrix',
    [
        np.zeros((3, 4), dtype=int), # too few rows
        np.zeros((4, 4, 1), dtype=int), # too many dimensions
        np.full((4, 4), 2), # entries outside of {0, 1}
        [[0]*4]*4, # not a numpy array
    ]
)
def test_from_matrix_rejects_malformed(matrix) -> None:
    '''Test that matrices of the wrong shape, or with entries other than 0 and 1, are rejected'''
    with pytest.raises(RelationTypeError):
        _ = Relation.from_matrix(matrix, LETTERS, NUMBERS)

def test_from_matrix_rejects_non_set() -> None:
    '''Test that the sets indexing a matrix must actually be sets'''
    with pytest.raises(RelationTypeError):
        _ = Relation.from_matrix(np.eye(2, dtype=int), [1, 2])

# matrix algorithm tests
def test_incidence_matrix_ignores_foreign_pairs() -> None:
    '''Test that pairs not indexed by the given rows and columns are left out of the matrix'''
    matrix = incidence_matrix({('a', 1), ('z', 1)}, ('a', 'b'), (1,))
    assert np.array_equal(matrix, np.array([[1], [0]]))

def test_matrix_pairs() -> None:
    '''Test that nonzero entries are read off as pairs of the corresponding row and column elements'''
    matrix = np.array([
        [0, 1],
        [1, 1],
    ])
    assert matrix_pairs(matrix, ('a', 'b'), ('x', 'y')) == {('a', 'y'), ('b', 'x'), ('b', 'y')}

def test_boolean_product() -> None:
    '''Test that the boolean product saturates at 1 instead of counting paths'''
    matrix_1 = np.array([
        [1, 1],
        [0, 1],
    ])
    matrix_2 = np.array([
        [1, 0, 1],
        [1, 0, 0],
    ])
    expected = np.array([
        [True, False, True],
        [True, False, False],
    ])
    assert np.array_equal(boolean_product(matrix_1, matrix_2), expected)

def test_warshall_closure_chain() -> None:
    '''Test that Warshall's algorithm connects every node of a path to all nodes downstream of it'''
    chain = np.diag(np.ones(3, dtype=int), k=1) # 0 -> 1 -> 2 -> 3
    expected = np.triu(np.ones((4, 4), dtype=bool), k=1)
    assert np.array_equal(warshall_closure(chain), expected)

def test_warshall_closure_cycle() -> None:
    '''Test that every node on a cycle becomes related to every other node on it, itself included'''
    cycle = np.roll(np.eye(3, dtype=int), shift=1, axis=1) # 0 -> 1 -> 2 -> 0
    assert warshall_closure(cycle).all()

def test_warshall_closure_preserves_input() -> None:
    '''Test that the adjacency matrix passed to Warshall's algorithm is left unmodified'''
    chain = np.diag(np.ones(2, dtype=int), k=1)
    _ = warshall_closure(chain)
    assert chain.sum() == 2

def test_warshall_closure_rejects_non_square() -> None:
    '''Test that non-square adjacency matrices are rejected'''
    with pytest.raises(ValueError):
        _ = warshall_closure(np.zeros((2, 3), dtype=int))

# array type tests
@pytest.mark.parametrize(
    'matrix, expected_zero_one',
    [
        (np.zeros((2, 2)), True),
        (np.eye(3, dtype=bool), True),
        (np.array([[0, 1], [1, 0]]), True),
        (np.array([[0, 2], [1, 0]]), False),
        (np.array([[0.5]]), False),
        (np.array([[-1]]), False),
    ]
)
def test_is_zero_one(matrix : np.ndarray, expected_zero_one : bool) -> None:
    '''Test identification of zero-one matrices'''
    assert is_zero_one(matrix) == expected_zero_one

def test_as_zero_one_matrix_boolean() -> None:
    '''Test that zero-one matrices are converted into boolean arrays'''
    converted = as_zero_one_matrix(np.array([[0, 1]]), shape=(1, 2))
    assert converted.dtype == bool and np.array_equal(converted, [[False, True]])
