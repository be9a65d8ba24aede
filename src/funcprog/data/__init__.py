"""Functional containers: Opt, Result, PList, Stream, Tree and the Lazy cell.

Example:
    >>> from funcprog.data import PList, Present, Absent, option
    >>> option.sequence([Present(1), Present(2)])
    Present([1, 2])
    >>> PList.of(1, 2, 3).reverse()
    PList.of(3, 2, 1)
"""

from . import option, plist, result, stream, tree, validation
from .lazy import Lazy, lazy_if
from .option import Absent, Opt, Present
from .plist import Cons, Nil, PList
from .result import Err, Ok, Result, attempt
from .stream import End, Link, Stream
from .tree import Branch, Leaf, Tree

__all__ = [
    # Modules (collection operations live at module level: option.sequence, result.map2, ...)
    "option", "result", "plist", "stream", "tree", "validation",
    # Optional container
    "Opt", "Present", "Absent",
    # Disjoint-result container
    "Result", "Ok", "Err", "attempt",
    # Deferred cell
    "Lazy", "lazy_if",
    # Persistent list
    "PList", "Cons", "Nil",
    # Lazy stream
    "Stream", "Link", "End",
    # Binary tree
    "Tree", "Leaf", "Branch",
]
