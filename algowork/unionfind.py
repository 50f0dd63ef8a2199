# -*- coding: utf-8 -*-
# Copyright 2015 Michael Helmling
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation

import numpy as np


class WeightedQuickUnionUF:
    """Union-find over the elements ``0, ..., n-1`` with union by size and path halving."""

    def __init__(self, n):
        if n < 0:
            raise ValueError('number of elements must be nonnegative, got {}'.format(n))
        self.parent = np.arange(n, dtype=np.intp)
        self.size = np.ones(n, dtype=np.intp)
        self.count = n

    def validate(self, p):
        if p < 0 or p >= self.parent.size:
            raise IndexError('element {} not in range [0, {})'.format(p, self.parent.size))

    def find(self, p):
        self.validate(p)
        parent = self.parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return int(p)

    def connected(self, p, q):
        return self.find(p) == self.find(q)

    def union(self, p, q):
        rootP = self.find(p)
        rootQ = self.find(q)
        if rootP == rootQ:
            return
        if self.size[rootP] < self.size[rootQ]:
            rootP, rootQ = rootQ, rootP
        self.parent[rootQ] = rootP
        self.size[rootP] += self.size[rootQ]
        self.count -= 1

    def __len__(self):
        return self.parent.size
