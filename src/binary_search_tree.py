"""
Binary Search Tree - unbalanced, node-recursive implementation.

Every BinarySearchTree instance is a node and, at the same time, the whole
tree rooted at that node. A fresh instance is the empty tree. Elements smaller
than a node's element live in its left subtree, greater-or-equal elements in
its right subtree, so duplicates are kept as separate nodes.

Elements must be totally ordered through ``<`` and ``==``. The order is never
checked at runtime; an inconsistent order silently breaks the tree.
"""

from typing import TypeVar, Generic, List, Iterator, Optional

T = TypeVar('T')


class BinarySearchTree(Generic[T]):
    def __init__(self) -> None:
        self._value: Optional[T] = None
        self._left: Optional[BinarySearchTree[T]] = None
        self._right: Optional[BinarySearchTree[T]] = None
        self._size: int = 0

    @classmethod
    def _leaf(cls, value: T) -> 'BinarySearchTree[T]':
        node: BinarySearchTree[T] = cls()
        node.insert(value)
        return node

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def left(self) -> Optional['BinarySearchTree[T]']:
        return self._left

    @property
    def right(self) -> Optional['BinarySearchTree[T]']:
        return self._right

    def search(self, target: T) -> bool:
        if self._size == 0:
            return False

        node: Optional[BinarySearchTree[T]] = self
        while node is not None:
            if target == node._value:
                return True
            if target < node._value:
                node = node._left
            else:
                node = node._right
        return False

    def insert(self, value: T) -> None:
        """
        Add ``value`` to the tree. Never rebalances.

        Values strictly less than a node's element go left, everything else
        (equal included) goes right. Exactly one node is added per call.
        """
        if self._size == 0:
            self._value = value
            self._size = 1
            return

        path: List[BinarySearchTree[T]] = []
        node = self
        while True:
            path.append(node)
            if value < node._value:
                if node._left is None:
                    node._left = BinarySearchTree._leaf(value)
                    break
                node = node._left
            else:
                if node._right is None:
                    node._right = BinarySearchTree._leaf(value)
                    break
                node = node._right

        # counts change only once the leaf is attached, so a comparison
        # error part way down leaves the tree untouched
        for visited in path:
            visited._size += 1

    def contains(self, value: T) -> bool:
        return self.search(value)

    def min(self) -> Optional[T]:
        if self._size == 0:
            return None
        node = self
        while node._left is not None:
            node = node._left
        return node._value

    def max(self) -> Optional[T]:
        if self._size == 0:
            return None
        node = self
        while node._right is not None:
            node = node._right
        return node._value

    def iter(self) -> 'InOrderIterator[T]':
        return InOrderIterator(self)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        if self._size == 0:
            return 0
        tallest = 0
        stack: List[tuple] = [(self, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            if node._left is not None:
                stack.append((node._left, depth + 1))
            if node._right is not None:
                stack.append((node._right, depth + 1))
        return tallest

    def in_order(self) -> List[T]:
        return list(self.iter())

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._size == 0:
            return result
        stack: List[BinarySearchTree[T]] = [self]
        while stack:
            node = stack.pop()
            result.append(node._value)
            if node._right is not None:
                stack.append(node._right)
            if node._left is not None:
                stack.append(node._left)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._size == 0:
            return result
        stack: List[BinarySearchTree[T]] = [self]
        while stack:
            node = stack.pop()
            result.append(node._value)
            if node._left is not None:
                stack.append(node._left)
            if node._right is not None:
                stack.append(node._right)
        result.reverse()
        return result

    def copy(self) -> 'BinarySearchTree[T]':
        # reinserting in pre-order reproduces the same shape
        clone: BinarySearchTree[T] = BinarySearchTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.search(value)

    def __iter__(self) -> 'InOrderIterator[T]':
        return self.iter()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        return self.in_order() == other.in_order()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size})"


class InOrderIterator(Generic[T]):
    """
    Lazy in-order cursor over a BinarySearchTree.

    The stack holds the path from the root down to the next node to yield, so
    the top of the stack is always the smallest element not yet produced.
    Mutating the tree while a cursor is live is not supported.
    """

    def __init__(self, tree: BinarySearchTree[T]) -> None:
        self._stack: List[BinarySearchTree[T]] = []
        if not tree.is_empty():
            self._stack.append(tree)
            self._push_left()

    def _push_left(self) -> None:
        node = self._stack[-1].left
        while node is not None:
            self._stack.append(node)
            node = node.left

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        if node.right is not None:
            self._stack.append(node.right)
            self._push_left()
        return node.value  # type: ignore[return-value]
