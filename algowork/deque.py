# -*- coding: utf-8 -*-
# Copyright 2015 Michael Helmling
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation

"""Double-ended queue implemented as a doubly-linked list."""


class EmptyDequeError(IndexError):
    """Raised when removing from an empty :class:`Deque`."""


class DequeNode:

    __slots__ = ('item', 'prev', 'next')

    def __init__(self, item, prev=None, next=None):
        self.item = item
        self.prev = prev
        self.next = next


def _iterItems(node):
    while node is not None:
        yield node.item
        node = node.next


class Deque:
    """Generic deque with constant-time insertion and removal at both ends.

    ``None`` cannot be stored; wrap it if absence must be represented.
    """

    def __init__(self):
        self.first = None
        self.last = None
        self.nitems = 0

    def isEmpty(self):
        """Return *True* iff the deque holds no item."""
        return self.first is None

    def size(self):
        """Return the number of items in the deque."""
        return self.nitems

    def __len__(self):
        return self.nitems

    def addFirst(self, item):
        """Add *item* to the front of the deque.

        Raises :class:`ValueError` if *item* is ``None``.
        """
        if item is None:
            raise ValueError('cannot add None to a deque')
        node = DequeNode(item, next=self.first)
        if self.isEmpty():
            self.last = node
        else:
            self.first.prev = node
        self.first = node
        self.nitems += 1

    def addLast(self, item):
        """Add *item* to the back of the deque.

        Raises :class:`ValueError` if *item* is ``None``.
        """
        if item is None:
            raise ValueError('cannot add None to a deque')
        node = DequeNode(item, prev=self.last)
        if self.isEmpty():
            self.first = node
        else:
            self.last.next = node
        self.last = node
        self.nitems += 1

    def removeFirst(self):
        """Remove and return the item at the front.

        Raises :class:`EmptyDequeError` if the deque is empty.
        """
        if self.isEmpty():
            raise EmptyDequeError('removeFirst from empty deque')
        node = self.first
        if node.next is None:
            self.first = None
            self.last = None
        else:
            self.first = node.next
            self.first.prev = None
        self.nitems -= 1
        return node.item

    def removeLast(self):
        """Remove and return the item at the back.

        Raises :class:`EmptyDequeError` if the deque is empty.
        """
        if self.isEmpty():
            raise EmptyDequeError('removeLast from empty deque')
        node = self.last
        if node.prev is None:
            self.first = None
            self.last = None
        else:
            self.last = node.prev
            self.last.next = None
        self.nitems -= 1
        return node.item

    def __iter__(self):
        # the front node is bound now, not on the first call to next()
        return _iterItems(self.first)

    def __repr__(self):
        return 'Deque([{}])'.format(', '.join(repr(item) for item in self))
