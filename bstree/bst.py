"""
Binary Search Tree (BST) holding unique, totally-ordered keys.
Smaller keys live in the left subtree, larger keys in the right subtree.
Duplicates are ignored on insert. No rebalancing is ever performed, so the
shape of the tree is a direct function of insertion order.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple, Union, cast

logger = logging.getLogger(__name__)


@dataclass
class BSTNode:
    """Node in the BST. Owns at most two children; None means no child."""

    key: Any
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None


class _Imbalanced:
    """Marker propagated upward by the height pass once a subtree is unbalanced."""

    def __repr__(self) -> str:
        return "IMBALANCED"


IMBALANCED = _Imbalanced()

Height = Union[int, _Imbalanced]


def _count_nodes(root: Optional[BSTNode]) -> int:
    count = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        count += 1
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return count


class BST:
    """
    Binary Search Tree keyed by any type with a total order.
    Point operations cost O(height); traversals cost O(n).
    """

    def __init__(self, root: Optional[BSTNode] = None) -> None:
        self._root = root
        self._size = _count_nodes(root)

    @property
    def root(self) -> Optional[BSTNode]:
        return self._root

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.dfs_in_order())

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __repr__(self) -> str:
        return f"BST({self.dfs_in_order()!r})"

    # Insertion

    def insert(self, key: Any) -> "BST":
        """Insert key by iterative descent. Returns the tree for chaining."""
        if self._root is None:
            self._root = BSTNode(key)
            self._size += 1
            return self

        current = self._root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = BSTNode(key)
                    self._size += 1
                    return self
                current = current.left
            elif key > current.key:
                if current.right is None:
                    current.right = BSTNode(key)
                    self._size += 1
                    return self
                current = current.right
            else:
                logger.debug("Ignoring duplicate key %r", key)
                return self

    def insert_recursively(self, key: Any) -> "BST":
        """Insert key by recursive descent from the root. Returns the tree."""
        if self._root is None:
            self._root = BSTNode(key)
            self._size += 1
            return self
        try:
            self._insert_at(self._root, key)
        except RecursionError as e:
            raise RuntimeError(
                f"Tree is too deep to insert {key!r} recursively; use insert() instead."
            ) from e
        return self

    def _insert_at(self, node: BSTNode, key: Any) -> None:
        if key < node.key:
            if node.left is None:
                node.left = BSTNode(key)
                self._size += 1
            else:
                self._insert_at(node.left, key)
        elif key > node.key:
            if node.right is None:
                node.right = BSTNode(key)
                self._size += 1
            else:
                self._insert_at(node.right, key)
        else:
            logger.debug("Ignoring duplicate key %r", key)

    # Lookup

    def find(self, key: Any) -> Optional[BSTNode]:
        """Return the node holding key, or None. Uses iteration."""
        current = self._root
        while current is not None:
            if key == current.key:
                return current
            if key < current.key:
                current = current.left
            else:
                current = current.right
        return None

    def find_recursively(self, key: Any) -> Optional[BSTNode]:
        """Return the node holding key, or None. Uses recursion."""
        try:
            return self._find_at(self._root, key)
        except RecursionError as e:
            raise RuntimeError(
                f"Tree is too deep to find {key!r} recursively; use find() instead."
            ) from e

    def _find_at(self, node: Optional[BSTNode], key: Any) -> Optional[BSTNode]:
        if node is None:
            return None
        if key == node.key:
            return node
        if key < node.key:
            return self._find_at(node.left, key)
        return self._find_at(node.right, key)

    def min(self) -> Optional[Any]:
        """Smallest key (leftmost node), or None for an empty tree."""
        if self._root is None:
            return None
        node = self._root
        while node.left is not None:
            node = node.left
        return node.key

    def max(self) -> Optional[Any]:
        """Largest key (rightmost node), or None for an empty tree."""
        if self._root is None:
            return None
        node = self._root
        while node.right is not None:
            node = node.right
        return node.key

    # Traversals. Explicit stacks keep degenerate chains off the call stack.

    def dfs_pre_order(self) -> List[Any]:
        """Node, then left subtree, then right subtree."""
        result: List[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            # right pushed first so left is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def dfs_in_order(self) -> List[Any]:
        """Left subtree, then node, then right subtree. Ascending for a valid BST."""
        result: List[Any] = []
        stack: List[BSTNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def dfs_post_order(self) -> List[Any]:
        """Left subtree, then right subtree, then node."""
        result: List[Any] = []
        stack: List[Tuple[BSTNode, bool]] = []
        if self._root is not None:
            stack.append((self._root, False))
        while stack:
            node, children_done = stack.pop()
            if children_done:
                result.append(node.key)
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))
        return result

    def bfs(self) -> List[Any]:
        """Level order, left to right within a level."""
        result: List[Any] = []
        queue = deque()
        if self._root is not None:
            queue.append(self._root)
        while queue:
            node = queue.popleft()
            result.append(node.key)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    # Removal

    def remove(self, key: Any) -> Optional[Any]:
        """
        Remove the node holding key and return the removed key, or None if
        key is not in the tree.

        A node with two children takes its in-order successor's key, and the
        search then continues into its right subtree to unlink the
        successor's original slot, which has at most one child.
        """
        node = self._root
        parent: Optional[BSTNode] = None
        removed: Optional[Any] = None
        found = False

        while node is not None:
            if key < node.key:
                parent, node = node, node.left
                continue
            if key > node.key:
                parent, node = node, node.right
                continue

            if not found:
                removed = node.key
                found = True

            if node.left is not None and node.right is not None:
                successor = node.right
                while successor.left is not None:
                    successor = successor.left
                logger.debug("Promoting successor %r into %r", successor.key, node.key)
                node.key = successor.key
                key = successor.key
                parent, node = node, node.right
                continue

            replacement = node.left if node.left is not None else node.right
            if parent is None:
                self._root = replacement
            elif parent.left is node:
                parent.left = replacement
            else:
                parent.right = replacement
            node.left = node.right = None
            self._size -= 1
            return removed

        logger.debug("Key %r not found; nothing removed", key)
        return None

    # Structural queries

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return cast(int, self._heights(check_balance=False))

    def is_balanced(self) -> bool:
        """True if at every node the child subtree heights differ by at most 1."""
        return self._heights(check_balance=True) is not IMBALANCED

    def _heights(self, check_balance: bool) -> Height:
        """
        Single post-order pass computing subtree heights bottom-up.
        An absent child has height -1. With check_balance set, a node whose
        children differ by more than one (or already carry IMBALANCED)
        yields IMBALANCED instead of a height.
        """
        if self._root is None:
            return -1

        computed = {}
        stack: List[Tuple[BSTNode, bool]] = [(self._root, False)]
        while stack:
            node, children_done = stack.pop()
            if not children_done:
                stack.append((node, True))
                if node.right is not None:
                    stack.append((node.right, False))
                if node.left is not None:
                    stack.append((node.left, False))
                continue

            left = computed.pop(id(node.left), -1) if node.left is not None else -1
            right = computed.pop(id(node.right), -1) if node.right is not None else -1
            if left is IMBALANCED or right is IMBALANCED:
                computed[id(node)] = IMBALANCED
            elif check_balance and abs(left - right) > 1:
                computed[id(node)] = IMBALANCED
            else:
                computed[id(node)] = max(left, right) + 1

        return computed[id(self._root)]

    def find_second_highest(self) -> Optional[Any]:
        """Second-largest key, or None when the tree holds fewer than two nodes."""
        if self._root is None:
            return None

        current = self._root
        parent: Optional[BSTNode] = None
        while current.right is not None:
            parent = current
            current = current.right

        if current.left is not None:
            node = current.left
            while node.right is not None:
                node = node.right
            return node.key

        if parent is None:
            return None
        return parent.key
