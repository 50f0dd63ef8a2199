# -*- coding: utf-8 -*-
# Copyright 2015 Michael Helmling
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation
import random
import unittest

from algowork.deque import Deque, EmptyDequeError

NELTS = 10
RANDOM_OPERATIONS = 1000


class TestDeque(unittest.TestCase):

    def setUp(self):
        self.deque = Deque()

    def test_isEmpty(self):
        self.assertTrue(self.deque.isEmpty())
        self.deque.addFirst(1)
        self.assertFalse(self.deque.isEmpty())
        self.deque.addLast(2)
        self.assertFalse(self.deque.isEmpty())
        self.deque.removeLast()
        self.assertFalse(self.deque.isEmpty())
        self.deque.removeFirst()
        self.assertTrue(self.deque.isEmpty())

    def test_size(self):
        self.assertEqual(self.deque.size(), 0)
        self.deque.addFirst(1)
        self.assertEqual(self.deque.size(), 1)
        self.deque.addLast(2)
        self.assertEqual(self.deque.size(), 2)
        self.assertEqual(len(self.deque), 2)
        self.deque.removeLast()
        self.assertEqual(self.deque.size(), 1)
        self.deque.removeFirst()
        self.assertEqual(self.deque.size(), 0)

    def test_addFirst(self):
        for i in range(NELTS):
            self.deque.addFirst(i)
        self.assertEqual(list(self.deque), list(range(NELTS - 1, -1, -1)))

    def test_addLast(self):
        for i in range(NELTS):
            self.deque.addLast(i)
        self.assertEqual(list(self.deque), list(range(NELTS)))

    def test_removeFirst(self):
        for i in range(NELTS):
            self.deque.addFirst(i)
        removed = [self.deque.removeFirst() for _ in range(NELTS)]
        self.assertEqual(removed, list(range(NELTS - 1, -1, -1)))
        self.assertTrue(self.deque.isEmpty())
        self.assertRaises(EmptyDequeError, self.deque.removeFirst)

    def test_removeLast(self):
        for i in range(NELTS):
            self.deque.addLast(i)
        removed = [self.deque.removeLast() for _ in range(NELTS)]
        self.assertEqual(removed, list(range(NELTS - 1, -1, -1)))
        self.assertTrue(self.deque.isEmpty())
        self.assertRaises(EmptyDequeError, self.deque.removeLast)

    def test_emptyErrorIsIndexError(self):
        with self.assertRaises(IndexError):
            self.deque.removeLast()

    def test_addNone(self):
        self.deque.addLast('x')
        self.assertRaises(ValueError, self.deque.addFirst, None)
        self.assertRaises(ValueError, self.deque.addLast, None)
        self.assertEqual(self.deque.size(), 1)
        self.assertEqual(list(self.deque), ['x'])

    def test_falsyItemsAllowed(self):
        for item in 0, '', False, []:
            self.deque.addLast(item)
        self.assertEqual(self.deque.size(), 4)
        self.assertEqual(self.deque.removeFirst(), 0)

    def test_singleElement(self):
        self.deque.addLast('a')
        self.assertIs(self.deque.first, self.deque.last)
        self.assertEqual(self.deque.removeFirst(), 'a')
        self.assertIsNone(self.deque.first)
        self.assertIsNone(self.deque.last)
        self.deque.addFirst('b')
        self.assertIs(self.deque.first, self.deque.last)
        self.assertEqual(self.deque.removeLast(), 'b')
        self.assertIsNone(self.deque.first)
        self.assertIsNone(self.deque.last)

    def test_mixedEnds(self):
        self.deque.addFirst(2)
        self.deque.addLast(3)
        self.deque.addFirst(1)
        self.deque.addLast(4)
        self.assertEqual(list(self.deque), [1, 2, 3, 4])
        self.assertEqual(self.deque.removeLast(), 4)
        self.assertEqual(self.deque.removeFirst(), 1)
        self.assertEqual(list(self.deque), [2, 3])
        self.assertEqual(self.deque.removeFirst(), 2)
        self.assertEqual(self.deque.removeFirst(), 3)
        self.assertTrue(self.deque.isEmpty())

    def test_iteratorIsOneShot(self):
        for i in range(3):
            self.deque.addLast(i)
        iterator = iter(self.deque)
        self.assertEqual(list(iterator), [0, 1, 2])
        self.assertEqual(list(iterator), [])
        self.assertRaises(StopIteration, next, iterator)

    def test_iteratorStartsAtCreation(self):
        self.deque.addLast(1)
        iterator = iter(self.deque)
        self.deque.addFirst(0)
        self.assertEqual(list(iterator), [1])

    def test_repr(self):
        self.assertEqual(repr(self.deque), 'Deque([])')
        self.deque.addLast('a')
        self.deque.addLast(1)
        self.assertEqual(repr(self.deque), "Deque(['a', 1])")

    def test_randomOperations(self):
        """Compare a random operation sequence against a list and check the link structure."""
        rnd = random.Random(3874)
        reference = []
        for i in range(RANDOM_OPERATIONS):
            op = rnd.randrange(4)
            if op == 0:
                self.deque.addFirst(i)
                reference.insert(0, i)
            elif op == 1:
                self.deque.addLast(i)
                reference.append(i)
            elif op == 2:
                if reference:
                    self.assertEqual(self.deque.removeFirst(), reference.pop(0))
                else:
                    self.assertRaises(EmptyDequeError, self.deque.removeFirst)
            else:
                if reference:
                    self.assertEqual(self.deque.removeLast(), reference.pop())
                else:
                    self.assertRaises(EmptyDequeError, self.deque.removeLast)
            self.assertEqual(self.deque.size(), len(reference))
            self.assertEqual(self.deque.isEmpty(), len(reference) == 0)
        self.assertEqual(list(self.deque), reference)
        self.checkLinks()

    def checkLinks(self):
        backwards = []
        node = self.deque.last
        while node is not None:
            backwards.append(node.item)
            node = node.prev
        self.assertEqual(backwards, list(reversed(list(self.deque))))
        if self.deque.first is not None:
            self.assertIsNone(self.deque.first.prev)
            self.assertIsNone(self.deque.last.next)


if __name__ == "__main__":
    unittest.main()
