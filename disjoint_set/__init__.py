"""
.. autosummary::
    :nosignatures:

    DisjointSet
    ArrayDisjointSet
    Record
    DisjointSetError
    ElementNotFoundError
"""

from importlib.metadata import version

from disjoint_set.common import (
    DisjointSetError,
    ElementNotFoundError,
    Record
)
from disjoint_set.union_find import DisjointSet
from disjoint_set.array_union_find import ArrayDisjointSet

from disjoint_set.graph import *
import disjoint_set.graph as graph

__version__ = version(__package__ or __name__)

__all__ = [
    '__version__',
    'ArrayDisjointSet',
    'DisjointSet',
    'DisjointSetError',
    'ElementNotFoundError',
    'Record'
]
__all__.extend(graph.__all__)
