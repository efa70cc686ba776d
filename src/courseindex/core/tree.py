"""Binary search tree index of courses.

CourseTree keeps courses ordered by canonical identifier. The tree is
never rebalanced, so insert order decides its shape and a sorted input
degenerates into a linked list. Every walk over the tree therefore uses
an explicit stack instead of recursion:

- insert/search descend with a cursor
- traverse yields courses in order from a generator
- size/height visit each node once
- clear unlinks nodes children-first
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from courseindex.core.models import Course
from courseindex.core.records import canonicalize


class _Node:
    """Tree node owning one course and its two subtrees."""

    __slots__ = ("course", "left", "right")

    def __init__(self, course: Course) -> None:
        self.course = course
        self.left: _Node | None = None
        self.right: _Node | None = None


class CourseTree:
    """Ordered index of courses keyed by canonical identifier.

    Identifiers are unique: inserting a course whose identifier is already
    present replaces the stored course and leaves the node count unchanged.

    Example:
        >>> tree = CourseTree()
        >>> tree.insert(Course("CS200", "Data Structures", ("CS100",)))
        >>> tree.insert(Course("CS100", "Intro"))
        >>> [c.id for c in tree.traverse()]
        ['CS100', 'CS200']
        >>> tree.search("cs100").name
        'Intro'
    """

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, course: Course) -> None:
        """Insert a course, replacing any course with the same identifier.

        Args:
            course: Course to store. A non-canonical identifier is
                canonicalized before the course is stored.
        """
        key = canonicalize(course.id)
        if key != course.id:
            course = replace(course, id=key)
        if self._root is None:
            self._root = _Node(course)
            return

        node = self._root
        while True:
            node_key = node.course.id
            if key < node_key:
                if node.left is None:
                    node.left = _Node(course)
                    return
                node = node.left
            elif key > node_key:
                if node.right is None:
                    node.right = _Node(course)
                    return
                node = node.right
            else:
                node.course = course
                return

    def search(self, course_id: str) -> Course | None:
        """Find a course by identifier, ignoring case.

        Args:
            course_id: Identifier to look up (any case)

        Returns:
            The stored Course, or None if no course has that identifier
        """
        key = canonicalize(course_id)
        node = self._root
        while node is not None:
            node_key = node.course.id
            if key == node_key:
                return node.course
            node = node.left if key < node_key else node.right
        return None

    def traverse(self) -> Iterator[Course]:
        """Yield all courses in ascending identifier order.

        Each call returns a new single-pass generator. The tree must not be
        modified while a traversal is in progress.
        """
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def size(self) -> int:
        """Count the nodes in the tree by visiting every one of them."""
        count = 0
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            count += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return count

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        height = 0
        stack = [(self._root, 1)] if self._root is not None else []
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return height

    def clear(self) -> None:
        """Release every node, children before parents, leaving the tree empty."""
        if self._root is None:
            return
        stack = [self._root]
        self._root = None
        while stack:
            node = stack[-1]
            if node.left is not None:
                stack.append(node.left)
                node.left = None
            elif node.right is not None:
                stack.append(node.right)
                node.right = None
            else:
                stack.pop()

    def is_empty(self) -> bool:
        return self._root is None

    def __iter__(self) -> Iterator[Course]:
        return self.traverse()

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, course_id: object) -> bool:
        return isinstance(course_id, str) and self.search(course_id) is not None

    def __repr__(self) -> str:
        return f"CourseTree(size={self.size()})"
