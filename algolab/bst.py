"""Binary search trees of integers, handled through their root node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Node:
    """A tree node holding ``value`` with optional ``left`` and ``right`` subtrees."""

    value: int
    left: Optional[Node] = None
    right: Optional[Node] = None


def insert(tree: Optional[Node], value: int) -> Node:
    """Insert ``value`` unless already present and return the root."""
    new = Node(value)
    if tree is None:
        return new
    current = tree
    while True:
        if value < current.value:
            if current.left is None:
                current.left = new
                return tree
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = new
                return tree
            current = current.right
        else:
            return tree


def search(tree: Optional[Node], value: int) -> bool:
    """Return whether ``value`` is in the tree."""
    current = tree
    while current is not None:
        if value < current.value:
            current = current.left
        elif value > current.value:
            current = current.right
        else:
            return True
    return False


def join(t1: Optional[Node], t2: Optional[Node]) -> Optional[Node]:
    """Join two trees where every value of ``t1`` is below every value of ``t2``.

    The smallest node of ``t2`` becomes the new root.
    """
    if t1 is None:
        return t2
    if t2 is None:
        return t1
    if t2.left is None:
        t2.left = t1
        return t2

    parent = t2
    smallest = t2.left
    while smallest.left is not None:
        parent = smallest
        smallest = smallest.left

    parent.left = smallest.right
    smallest.left = t1
    smallest.right = t2
    return smallest


def delete(tree: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the tree if present and return the new root."""
    parent: Optional[Node] = None
    current = tree
    while current is not None and current.value != value:
        parent = current
        current = current.left if value < current.value else current.right
    if current is None:
        return tree

    replacement = join(current.left, current.right)
    if parent is None:
        return replacement
    if parent.left is current:
        parent.left = replacement
    else:
        parent.right = replacement
    return tree


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _pre_order_nodes(tree))


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest root-to-leaf path; -1 if empty."""
    levels = -1
    level = [tree] if tree is not None else []
    while level:
        levels += 1
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def prune(tree: Optional[Node], lo: int, hi: int) -> Optional[Node]:
    """Remove every value outside ``[lo, hi]`` and return the new root."""
    if tree is None:
        return None
    tree.left = prune(tree.left, lo, hi)
    tree.right = prune(tree.right, lo, hi)
    if tree.value < lo:
        return tree.right
    if tree.value > hi:
        return tree.left
    return tree


def _pre_order_nodes(tree: Optional[Node]) -> Iterator[Node]:
    pending = [tree] if tree is not None else []
    while pending:
        node = pending.pop()
        yield node
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def pre_order(tree: Optional[Node]) -> list[int]:
    """Return the values in pre-order."""
    return [node.value for node in _pre_order_nodes(tree)]


def in_order(tree: Optional[Node]) -> list[int]:
    """Return the values in in-order, which is ascending."""
    result: list[int] = []
    pending: list[Node] = []
    current = tree
    while pending or current is not None:
        while current is not None:
            pending.append(current)
            current = current.left
        node = pending.pop()
        result.append(node.value)
        current = node.right
    return result


def post_order(tree: Optional[Node]) -> list[int]:
    """Return the values in post-order."""
    result: list[int] = []
    pending = [tree] if tree is not None else []
    while pending:
        node = pending.pop()
        result.append(node.value)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    result.reverse()
    return result


# ASCII drawing of a tree

_MAX_HEIGHT = 1000
_INFINITY = 1 << 20
_GAP = 3  # gap between left and right nodes


@dataclass(eq=False)
class _Box:
    label: str
    left: Optional[_Box] = None
    right: Optional[_Box] = None
    parent_dir: int = 0  # -1 for a left child, 0 for the root, 1 for a right child
    edge_length: int = 0
    height: int = 0


def _build(tree: Optional[Node]) -> Optional[_Box]:
    if tree is None:
        return None
    box = _Box(str(tree.value), _build(tree.left), _build(tree.right))
    if box.left is not None:
        box.left.parent_dir = -1
    if box.right is not None:
        box.right.parent_dir = 1
    return box


def _left_profile(box: Optional[_Box], x: int, y: int, profile: list[int]) -> None:
    if box is None:
        return
    is_left = 1 if box.parent_dir == -1 else 0
    if y < len(profile):
        profile[y] = min(profile[y], x - (len(box.label) - is_left) // 2)
    if box.left is not None:
        for i in range(1, box.edge_length + 1):
            if y + i < len(profile):
                profile[y + i] = min(profile[y + i], x - i)
    step = box.edge_length + 1
    _left_profile(box.left, x - step, y + step, profile)
    _left_profile(box.right, x + step, y + step, profile)


def _right_profile(box: Optional[_Box], x: int, y: int, profile: list[int]) -> None:
    if box is None:
        return
    not_left = 1 if box.parent_dir != -1 else 0
    if y < len(profile):
        profile[y] = max(profile[y], x + (len(box.label) - not_left) // 2)
    if box.right is not None:
        for i in range(1, box.edge_length + 1):
            if y + i < len(profile):
                profile[y + i] = max(profile[y + i], x + i)
    step = box.edge_length + 1
    _right_profile(box.left, x - step, y + step, profile)
    _right_profile(box.right, x + step, y + step, profile)


def _compute_edge_lengths(box: Optional[_Box]) -> None:
    if box is None:
        return
    _compute_edge_lengths(box.left)
    _compute_edge_lengths(box.right)

    if box.left is None and box.right is None:
        box.edge_length = 0
    else:
        right_edge: list[int] = []
        left_edge: list[int] = []
        if box.left is None:
            hmin = 0
        else:
            right_edge = [-_INFINITY] * min(box.left.height, _MAX_HEIGHT)
            _right_profile(box.left, 0, 0, right_edge)
            hmin = box.left.height
        if box.right is None:
            hmin = 0
        else:
            left_edge = [_INFINITY] * min(box.right.height, _MAX_HEIGHT)
            _left_profile(box.right, 0, 0, left_edge)
            hmin = min(box.right.height, hmin)

        delta = 4
        for i in range(min(hmin, _MAX_HEIGHT)):
            delta = max(delta, _GAP + 1 + right_edge[i] - left_edge[i])

        # Two leaf children may sit within 1 of each other instead of 2.
        leaf_child = (box.left is not None and box.left.height == 1) or (
            box.right is not None and box.right.height == 1
        )
        if leaf_child and delta > 4:
            delta -= 1
        box.edge_length = (delta + 1) // 2 - 1

    h = 1
    if box.left is not None:
        h = max(box.left.height + box.edge_length + 1, h)
    if box.right is not None:
        h = max(box.right.height + box.edge_length + 1, h)
    box.height = h


@dataclass
class _LineWriter:
    parts: list[str] = field(default_factory=list)
    column: int = 0

    def pad_to(self, count: int) -> None:
        if count > 0:
            self.parts.append(" " * count)
            self.column += count

    def write(self, text: str) -> None:
        self.parts.append(text)
        self.column += len(text)


def _draw_level(box: Optional[_Box], x: int, level: int, line: _LineWriter) -> None:
    if box is None:
        return
    is_left = 1 if box.parent_dir == -1 else 0
    if level == 0:
        line.pad_to(x - line.column - (len(box.label) - is_left) // 2)
        line.write(box.label)
    elif box.edge_length >= level:
        if box.left is not None:
            line.pad_to(x - line.column - level)
            line.write("/")
        if box.right is not None:
            line.pad_to(x - line.column + level)
            line.write("\\")
    else:
        step = box.edge_length + 1
        _draw_level(box.left, x - step, level - step, line)
        _draw_level(box.right, x + step, level - step, line)


def render(tree: Optional[Node]) -> str:
    """Draw the tree as ASCII art, one text line per row; empty for no tree."""
    root = _build(tree)
    if root is None:
        return ""
    root.parent_dir = 0
    _compute_edge_lengths(root)

    profile = [_INFINITY] * min(root.height, _MAX_HEIGHT)
    _left_profile(root, 0, 0, profile)
    xmin = min([0, *profile])

    lines = []
    for level in range(root.height):
        line = _LineWriter()
        _draw_level(root, -xmin, level, line)
        lines.append("".join(line.parts) + "\n")
    if root.height >= _MAX_HEIGHT:
        lines.append(f"(Tree is taller than {_MAX_HEIGHT}; may be drawn incorrectly.)\n")
    return "".join(lines)