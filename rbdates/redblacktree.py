"""A red-black binary search tree holding unique ordered values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """One node of a red-black tree."""

    value: T
    is_red: bool = True
    left: Optional[TreeNode[T]] = field(default=None, repr=False)
    right: Optional[TreeNode[T]] = field(default=None, repr=False)
    parent: Optional[TreeNode[T]] = field(default=None, repr=False)


def _is_red(node: Optional[TreeNode]) -> bool:
    return node is not None and node.is_red


def _copy_subtree(
    node: Optional[TreeNode[T]], parent: Optional[TreeNode[T]]
) -> Optional[TreeNode[T]]:
    if node is None:
        return None
    clone = TreeNode(node.value, is_red=node.is_red, parent=parent)
    clone.left = _copy_subtree(node.left, clone)
    clone.right = _copy_subtree(node.right, clone)
    return clone


class RedBlackTree(Generic[T]):
    """A self-balancing search tree; adding a value already present does nothing."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode[T]] = None

    def add(self, value: T) -> None:
        """Insert ``value`` unless an equal value is already stored."""
        parent: Optional[TreeNode[T]] = None
        current = self.root
        while current is not None:
            parent = current
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return

        node = TreeNode(value, parent=parent)
        if parent is None:
            node.is_red = False
            self.root = node
            return
        if value < parent.value:
            parent.left = node
        else:
            parent.right = node

        if parent.parent is None:
            return
        self._fix_insert(node)

    def find(self, value: T) -> bool:
        """Return whether a value equal to ``value`` is stored."""
        current = self.root
        while current is not None:
            if value == current.value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def __contains__(self, value: object) -> bool:
        return self.find(value)  # type: ignore[arg-type]

    def copy(self) -> RedBlackTree[T]:
        """Return a tree with the same shape, colours and values."""
        clone: RedBlackTree[T] = RedBlackTree()
        clone.root = _copy_subtree(self.root, None)
        return clone

    def render(self) -> str:
        """Return the tree drawn one node per line, right subtrees first."""
        return "".join(self._render_lines(self.root, "", False))

    def __str__(self) -> str:
        return self.render()

    def _render_lines(
        self, node: Optional[TreeNode[T]], prefix: str, is_left: bool
    ) -> Iterator[str]:
        if node is None:
            return
        colour = " (R)" if node.is_red else " (B)"
        yield f"{prefix}|-- {node.value}{colour}\n"
        yield from self._render_lines(
            node.right, prefix + ("   " if is_left else "    "), True
        )
        yield from self._render_lines(node.left, prefix + "    ", False)

    def _fix_insert(self, node: TreeNode[T]) -> None:
        while node is not self.root and _is_red(node.parent):
            parent = node.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if _is_red(uncle):
                    parent.is_red = False
                    uncle.is_red = False
                    grand.is_red = True
                    node = grand
                else:
                    if node is parent.right:
                        node = parent
                        self._rotate_left(node)
                    node.parent.is_red = False
                    node.parent.parent.is_red = True
                    self._rotate_right(node.parent.parent)
            else:
                uncle = grand.left
                if _is_red(uncle):
                    parent.is_red = False
                    uncle.is_red = False
                    grand.is_red = True
                    node = grand
                else:
                    if node is parent.left:
                        node = parent
                        self._rotate_right(node)
                    node.parent.is_red = False
                    node.parent.parent.is_red = True
                    self._rotate_left(node.parent.parent)
        self.root.is_red = False

    def _replace_child(
        self, node: TreeNode[T], replacement: TreeNode[T]
    ) -> None:
        replacement.parent = node.parent
        if node.parent is None:
            self.root = replacement
        elif node is node.parent.left:
            node.parent.left = replacement
        else:
            node.parent.right = replacement

    def _rotate_right(self, node: TreeNode[T]) -> None:
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace_child(node, pivot)
        pivot.right = node
        node.parent = pivot

    def _rotate_left(self, node: TreeNode[T]) -> None:
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace_child(node, pivot)
        pivot.left = node
        node.parent = pivot