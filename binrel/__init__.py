'''Toolkit for binary relations between finite sets (Binary RELations, binrel)'''

from ._version import __version__
from .relation import (
    Relation,
    RelationError,
    RelationTypeError,
    NotOnOneSetError,
    InvalidRelationError,
)

TOOLKIT_NAME : str = 'The Binary Relations Toolkit (binrel)'
