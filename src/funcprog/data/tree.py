"""Immutable binary trees with a generalized fold.

Leaves hold all data; every Branch has exactly two children. fold() replaces
Leaf with `leaf_fn` and Branch with `branch_fn`, and every other operation in
this module is defined through it:

    size      = fold(t, lambda _: 1, lambda l, r: 1 + l + r)
    maximum   = fold(t, identity, max)
    depth     = fold(t, lambda _: 0, lambda l, r: 1 + max(l, r))
    map(f)    = fold(t, lambda x: Leaf(f(x)), Branch)

fold walks the tree with an explicit post-order work stack, so arbitrarily
deep (e.g. fully left-leaning) trees do not hit the recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Tree(Generic[T]):
    """Base of the two tree variants, Leaf and Branch. Not instantiated directly."""

    __slots__ = ()

    def fold(self, leaf_fn: Callable[[T], R], branch_fn: Callable[[R, R], R]) -> R:
        return fold(self, leaf_fn, branch_fn)

    def match(self, *, leaf: Callable[[T], U], branch: Callable[[Tree[T], Tree[T]], U]) -> U:
        """Exhaustive case analysis over both variants."""
        if isinstance(self, Leaf):
            return leaf(self.value)
        if isinstance(self, Branch):
            return branch(self.left, self.right)
        raise TypeError(f"not a Tree variant: {type(self).__name__}")

    def size(self) -> int:
        return size(self)

    def leaf_count(self) -> int:
        return leaf_count(self)

    def maximum(self) -> T:
        return maximum(self)

    def depth(self) -> int:
        return depth(self)

    def map(self, f: Callable[[T], U]) -> Tree[U]:
        return map_tree(self, f)

    def leaves(self) -> list[T]:
        return leaves(self)


@dataclass(frozen=True, slots=True)
class Leaf(Tree[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Branch(Tree[T]):
    left: Tree[T]
    right: Tree[T]


def fold(tree: Tree[T], leaf_fn: Callable[[T], R], branch_fn: Callable[[R, R], R]) -> R:
    """Generalized fold: leaf_fn on each leaf payload, branch_fn on each pair of folded subtrees.

    Example:
        >>> t = Branch(Leaf(1), Branch(Leaf(5), Leaf(3)))
        >>> fold(t, lambda x: x, max)
        5
    """
    results: list[R] = []
    stack: list[tuple[Tree[T], bool]] = [(tree, False)]
    while stack:
        node, expanded = stack.pop()
        if isinstance(node, Leaf):
            results.append(leaf_fn(node.value))
        elif expanded:
            right = results.pop()
            results.append(branch_fn(results.pop(), right))
        else:
            # children are pushed right-first so the left subtree is folded first
            stack.append((node, True))
            stack.append((node.right, False))  # type: ignore[attr-defined]
            stack.append((node.left, False))  # type: ignore[attr-defined]
    return results.pop()


def size(tree: Tree[T]) -> int:
    """Number of nodes, leaves and branches alike."""
    return fold(tree, lambda _: 1, lambda l, r: 1 + l + r)


def leaf_count(tree: Tree[T]) -> int:
    return fold(tree, lambda _: 1, lambda l, r: l + r)


def maximum(tree: Tree[T]) -> T:
    return fold(tree, lambda x: x, max)


def depth(tree: Tree[T]) -> int:
    """Length of the longest root-to-leaf path; a lone leaf has depth 0."""
    return fold(tree, lambda _: 0, lambda l, r: 1 + max(l, r))


def map_tree(tree: Tree[T], f: Callable[[T], U]) -> Tree[U]:
    """Same shape, each payload replaced by f(payload)."""
    return fold(tree, lambda x: Leaf(f(x)), Branch)


def leaves(tree: Tree[T]) -> list[T]:
    """Leaf payloads, left to right."""
    return fold(tree, lambda x: [x], lambda l, r: l + r)
