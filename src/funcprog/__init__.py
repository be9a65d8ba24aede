"""funcprog - a minimal functional standard library.

Four sum-type containers and a binary tree, each with a lawful, fold-based
combinator vocabulary (map, flat_map, fold, filter, sequence, traverse):

- Opt: a value or its absence
- Result: a value or a tagged error, first error wins
- PList: persistent singly-linked list with stack-safe folds
- Stream: lazy, memoized, possibly infinite sequence
- Tree: immutable binary tree with a generalized fold

Quick Start:
    >>> from funcprog import Present, Absent, Ok, Err, PList, stream, result
    >>>
    >>> Present(2).map(lambda x: x + 1).get_or_else(lambda: 0)
    3
    >>> result.map2(Err("bad name"), Err("bad age"), lambda n, a: (n, a))
    Err('bad name')
    >>> PList.of(1, 2, 3).fold_left(0, lambda acc, x: acc + x)
    6
    >>> stream.from_(1).filter(lambda x: x % 2 == 0).take(3).to_list()
    [2, 4, 6]

Configuration:
    Environment variables with the FUNCPROG_ prefix (see foundation.config),
    e.g. FUNCPROG_LOG_LEVEL=DEBUG, FUNCPROG_STREAM_MATERIALIZE_LIMIT=10000.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .basics import abs_value, factorial, fibonacci
from .data import (
    Absent,
    Branch,
    Cons,
    End,
    Err,
    Lazy,
    Leaf,
    Link,
    Nil,
    Ok,
    Opt,
    PList,
    Present,
    Result,
    Stream,
    Tree,
    attempt,
    lazy_if,
    option,
    plist,
    result,
    stream,
    tree,
    validation,
)
from .foundation import (
    ErrorCode,
    Fault,
    FaultException,
    FuncprogSettings,
    classify_exception,
    clear_settings_cache,
    configure_logging,
    get_logger,
    get_settings,
)

__all__ = [
    "__version__",
    # Containers
    "Opt", "Present", "Absent",
    "Result", "Ok", "Err", "attempt",
    "PList", "Cons", "Nil",
    "Stream", "Link", "End",
    "Tree", "Leaf", "Branch",
    "Lazy", "lazy_if",
    # Container modules
    "option", "result", "plist", "stream", "tree", "validation",
    # Basics
    "abs_value", "factorial", "fibonacci",
    # Foundation
    "ErrorCode", "Fault", "FaultException", "classify_exception",
    "FuncprogSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger",
]
