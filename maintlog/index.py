"""
MaintenanceIndex - an AVL tree of maintenance records keyed by date.

Dates are compared as plain strings. The fixed YYYY-MM-DD format sorts
lexically, so no date parsing happens here.

Every public operation leaves the tree satisfying:
- BST order: left keys < node key < right keys (strict, no duplicates)
- cached heights: height(node) == 1 + max(height(left), height(right))
- AVL balance: -1 <= height(left) - height(right) <= 1
"""

from typing import Callable, Iterator, Optional

from .outcome import DeleteOutcome, InsertOutcome, UpdateOutcome
from .record import MaintenanceRecord


class _Node:
    """Tree node. Owns its left and right subtrees exclusively."""

    def __init__(self, date: str, description: str, cost: float):
        self.date = date
        self.description = description
        self.cost = cost
        self.left: Optional["_Node"] = None
        self.right: Optional["_Node"] = None
        self.height = 1

    def to_record(self) -> MaintenanceRecord:
        return MaintenanceRecord(self.date, self.description, self.cost)


# =============================================================================
# Rotation primitives
# =============================================================================


def _height(node: Optional[_Node]) -> int:
    return node.height if node else 0


def _balance(node: Optional[_Node]) -> int:
    """Balance factor: height(left) - height(right). Empty subtree is 0."""
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    """Promote y.left to y's position and return it as the new subtree root."""
    x = y.left
    y.left = x.right
    x.right = y
    # Child before parent
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    """Promote x.right to x's position and return it as the new subtree root."""
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _min_node(node: _Node) -> _Node:
    """Leftmost node of a non-empty subtree."""
    current = node
    while current.left is not None:
        current = current.left
    return current


# =============================================================================
# MaintenanceIndex
# =============================================================================


class MaintenanceIndex:
    """Self-balancing index of maintenance records for one vehicle model."""

    def __init__(self):
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, date: str) -> bool:
        return self._find(date) is not None

    def __iter__(self) -> Iterator[MaintenanceRecord]:
        return self.traverse_in_order()

    @property
    def height(self) -> int:
        """Height of the whole tree (0 when empty)."""
        return _height(self._root)

    @property
    def is_empty(self) -> bool:
        return self._root is None

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _find(self, date: str) -> Optional[_Node]:
        node = self._root
        while node is not None and node.date != date:
            node = node.left if date < node.date else node.right
        return node

    def search(self, date: str) -> Optional[MaintenanceRecord]:
        """Look up the record stored for a date, or None if absent."""
        node = self._find(date)
        return node.to_record() if node else None

    def traverse_in_order(self) -> Iterator[MaintenanceRecord]:
        """
        Yield every record in ascending date order.

        Each call starts a fresh traversal; nothing is shared between
        iterators. Records are snapshots, so later updates are not
        reflected in values already yielded.
        """
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.to_record()
            node = node.right

    def export(self, sink: Callable[[MaintenanceRecord], None]) -> None:
        """Hand every record to sink, in ascending date order."""
        for record in self.traverse_in_order():
            sink(record)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def insert(self, date: str, description: str, cost: float) -> InsertOutcome:
        """
        Insert a new record.

        An existing record for the same date is left untouched and
        DUPLICATE_KEY is returned; use update() to change it.
        """
        if self._find(date) is not None:
            return InsertOutcome.DUPLICATE_KEY
        self._root = self._insert(self._root, date, description, cost)
        self._size += 1
        return InsertOutcome.INSERTED

    def _insert(
        self, node: Optional[_Node], date: str, description: str, cost: float
    ) -> _Node:
        if node is None:
            return _Node(date, description, cost)
        if date < node.date:
            node.left = self._insert(node.left, date, description, cost)
        else:
            node.right = self._insert(node.right, date, description, cost)

        _update_height(node)
        balance = _balance(node)

        # Compare against the inserted key to tell straight from zig-zag
        if balance > 1:
            if date > node.left.date:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1:
            if date < node.right.date:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def update(self, date: str, description: str, cost: float) -> UpdateOutcome:
        """Overwrite description and cost of an existing record in place."""
        node = self._find(date)
        if node is None:
            return UpdateOutcome.NOT_FOUND
        node.description = description
        node.cost = cost
        return UpdateOutcome.UPDATED

    def delete(self, date: str) -> DeleteOutcome:
        """Remove the record for a date, rebalancing every ancestor."""
        if self._find(date) is None:
            return DeleteOutcome.NOT_FOUND
        self._root = self._delete(self._root, date)
        self._size -= 1
        return DeleteOutcome.DELETED

    def _delete(self, node: Optional[_Node], date: str) -> Optional[_Node]:
        if node is None:
            return None

        if date < node.date:
            node.left = self._delete(node.left, date)
        elif date > node.date:
            node.right = self._delete(node.right, date)
        elif node.left is None or node.right is None:
            # Zero or one child: splice the child into this position
            return node.left if node.left is not None else node.right
        else:
            # Two children: copy the successor's fields up, then remove
            # the successor, which has no left child
            successor = _min_node(node.right)
            node.date = successor.date
            node.description = successor.description
            node.cost = successor.cost
            node.right = self._delete(node.right, successor.date)

        _update_height(node)
        balance = _balance(node)

        if balance > 1:
            if _balance(node.left) < 0:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1:
            if _balance(node.right) > 0:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node
