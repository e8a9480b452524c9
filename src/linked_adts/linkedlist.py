"""
A singly-linked list built from a chain of Elements.

Time Complexity:
Search: O(n)
Insert/Delete at an index: O(index), the chain is walked once to find the
predecessor and exactly one link is rewired. No element is ever copied.

The size is not cached, so size() and size_iterative() are both O(n).
The *_recursive variants recurse once per element and are bounded by the
interpreter's recursion limit (sys.getrecursionlimit()).
"""

from __future__ import annotations

import logging
from typing import Generic, Iterator, List, Optional, TypeVar

from ._common import are_equal, bracketed, check_index
from .errors import OutOfRangeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Returned by index_of when a value is absent
NOT_FOUND = -1


class Element(Generic[T]):
    """
    An element is a container which holds data of type T
    and the next element it is linked to.
    """

    __slots__ = ("data", "next")

    def __init__(self, data: T, next: Optional[Element[T]] = None) -> None:
        self.data: T = data
        self.next: Optional[Element[T]] = next

    def __repr__(self) -> str:
        return f"Element(data={self.data!r}, next={getattr(self.next, 'data', None)!r})"

    def __str__(self) -> str:
        # only renders this element, not the rest of the chain
        return str(self.data)


def _exceeds(index: int) -> OutOfRangeError:
    return OutOfRangeError(f"Index exceeds list bounds, found: {index}")


class LinkedList(Generic[T]):
    """
    LinkedList implements a singly-linked sequence over Elements.

    Passing another LinkedList to the constructor makes a shallow copy:
    a new, independent chain of Elements holding the same data objects.
    Indices are 0-based. None is a valid value.
    """

    def __init__(self, other: Optional[LinkedList[T]] = None) -> None:
        self._head: Optional[Element[T]] = None
        if other is not None:
            self._head = self._copy_chain(other._head)

    @staticmethod
    def _copy_chain(head: Optional[Element[T]]) -> Optional[Element[T]]:
        new_head: Optional[Element[T]] = None
        tail: Optional[Element[T]] = None
        current = head
        while current is not None:
            element = Element(current.data)
            if tail is None:
                new_head = element
            else:
                tail.next = element
            tail = element
            current = current.next
        return new_head

    def _values(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return self.size_iterative()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"LinkedList({self.to_string()})"

    def __copy__(self) -> LinkedList[T]:
        return LinkedList(self)

    def copy(self) -> LinkedList[T]:
        """Returns a shallow copy with its own chain of Elements."""
        return LinkedList(self)

    # -------------------------------
    # Queries
    # -------------------------------
    def is_empty(self) -> bool:
        return self._head is None

    def size(self) -> int:
        """Returns the number of elements, counted recursively."""

        def _size(element: Optional[Element[T]]) -> int:
            if element is None:
                return 0
            return 1 + _size(element.next)

        return _size(self._head)

    def size_iterative(self) -> int:
        """Returns the number of elements, counted with a loop."""
        count = 0
        current = self._head
        while current is not None:
            count += 1
            current = current.next
        return count

    def get(self, index: int) -> T:
        """
        Returns the value at the index specified.
        Raises OutOfRangeError if index < 0 or index >= size().
        """
        check_index(index)
        current = self._head
        for _ in range(index):
            if current is None:
                raise _exceeds(index)
            current = current.next
        if current is None:
            raise _exceeds(index)
        return current.data

    def get_recursive(self, index: int) -> T:
        """Same contract as get(), implemented by recursion on the chain."""
        check_index(index)

        def _get(element: Optional[Element[T]], steps: int) -> T:
            if element is None:
                raise _exceeds(index)
            if steps == 0:
                return element.data
            return _get(element.next, steps - 1)

        return _get(self._head, index)

    def index_of(self, value: T) -> int:
        """
        Returns the index of the first element equal to value,
        or NOT_FOUND (-1) if there is none.
        O(n), since in the worst case the entire chain is scanned.
        """
        index = 0
        current = self._head
        while current is not None and not are_equal(value, current.data):
            index += 1
            current = current.next
        if current is None:
            return NOT_FOUND
        return index

    def index_of_recursive(self, value: T) -> int:
        """Same contract as index_of(), implemented by recursion."""

        def _index_of(element: Optional[Element[T]]) -> int:
            if element is None:
                return NOT_FOUND
            if are_equal(value, element.data):
                return 0
            index = _index_of(element.next)
            if index == NOT_FOUND:
                return NOT_FOUND
            return 1 + index

        return _index_of(self._head)

    def contains(self, value: T) -> bool:
        return self.index_of(value) != NOT_FOUND

    # -------------------------------
    # Insertion
    # -------------------------------
    def add(self, index: int, value: T) -> None:
        """
        Inserts value so that it ends up at index, shifting the following
        elements back by one. index == size() appends.
        Raises OutOfRangeError if index < 0 or index > size().
        """
        check_index(index)
        if index == 0:
            self._head = Element(value, self._head)
        else:
            # walk to the element right before the insertion point
            prior = self._head
            for _ in range(index - 1):
                if prior is None:
                    break
                prior = prior.next
            if prior is None:
                raise _exceeds(index)
            prior.next = Element(value, prior.next)
        logger.debug(f"Added {value!r} at index {index}")

    def add_recursive(self, index: int, value: T) -> None:
        """Same contract as add(), implemented by recursion."""
        check_index(index)

        def _add_after(element: Optional[Element[T]], steps: int) -> None:
            if element is None:
                raise _exceeds(index)
            if steps == 0:
                element.next = Element(value, element.next)
                return
            _add_after(element.next, steps - 1)

        if index == 0:
            self._head = Element(value, self._head)
        else:
            _add_after(self._head, index - 1)
        logger.debug(f"Added {value!r} at index {index}")

    def add_last(self, value: T) -> None:
        """Appends value by walking to the end of the chain."""
        new_element = Element(value)
        if self._head is None:
            self._head = new_element
            logger.debug(f"Added {value!r} at the end")
            return
        current = self._head
        while current.next is not None:
            current = current.next
        current.next = new_element
        logger.debug(f"Added {value!r} at the end")

    def add_before(self, new_value: T, old_value: T) -> None:
        """
        Inserts new_value right before the first element equal to old_value.
        An empty list or a match at the head inserts at the front;
        if old_value is absent, new_value is appended.
        """
        if self._head is None or are_equal(old_value, self._head.data):
            self._head = Element(new_value, self._head)
            logger.debug(f"Added {new_value!r} at head")
            return
        current = self._head
        while current.next is not None and not are_equal(old_value, current.next.data):
            current = current.next
        # either current precedes the match, or it is the last element
        current.next = Element(new_value, current.next)
        logger.debug(f"Added {new_value!r} before {old_value!r}")

    # -------------------------------
    # Removal
    # -------------------------------
    def remove(self, index: int) -> T:
        """
        Detaches and returns the value at index, shifting the following
        elements forward by one.
        Raises OutOfRangeError if index < 0 or index >= size().
        """
        check_index(index)
        if self._head is None:
            raise _exceeds(index)
        if index == 0:
            removed = self._head
            self._head = removed.next
        else:
            prior = self._head
            for _ in range(index - 1):
                if prior.next is None:
                    raise _exceeds(index)
                prior = prior.next
            if prior.next is None:
                raise _exceeds(index)
            removed = prior.next
            prior.next = removed.next
        logger.debug(f"Removed {removed.data!r} at index {index}")
        return removed.data

    def delete(self, value: T) -> bool:
        """
        Removes the first element equal to value.
        Returns False if there is no such element.
        """
        if self._head is None:
            return False
        if are_equal(value, self._head.data):
            self._head = self._head.next
            logger.debug(f"Deleted {value!r} at head")
            return True
        prior = self._head
        current = prior.next
        while current is not None:
            if are_equal(value, current.data):
                prior.next = current.next
                logger.debug(f"Deleted {value!r}")
                return True
            prior, current = current, current.next
        return False

    def delete_first(self) -> bool:
        """Removes the head element. Returns False if the list is empty."""
        if self._head is None:
            return False
        self._head = self._head.next
        logger.debug("Deleted head element")
        return True

    def clear(self) -> None:
        """Detaches the whole chain."""
        self._head = None
        logger.debug("Cleared list")

    # -------------------------------
    # Export
    # -------------------------------
    def to_string(self) -> str:
        return bracketed(self._values())

    def to_string_reverse(self) -> str:
        return bracketed(reversed(self.to_list()))

    def to_list(self) -> List[T]:
        """Returns the values in order as a new Python list."""
        return list(self._values())
