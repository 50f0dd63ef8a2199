# -*- coding: utf-8 -*-
# Copyright 2015 Michael Helmling
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation

import numpy as np

from algowork.unionfind import WeightedQuickUnionUF


class Percolation:
    """Percolation system on an *n*-by-*n* grid of sites, initially all blocked.

    Rows and columns are numbered from 1 to *n*. The system percolates if some
    site in the top row is connected to some site in the bottom row through a
    chain of open, pairwise adjacent sites.

    Two union-find structures are kept: :attr:`uf` contains a virtual top and a
    virtual bottom site and answers :func:`percolates`, while :attr:`ufTop` only
    has the virtual top, so that :func:`isFull` is not fooled by bottom-row
    sites that reach the top via the virtual bottom (backwash).
    """

    def __init__(self, n):
        if n <= 0:
            raise ValueError('grid size must be positive, got {}'.format(n))
        self.n = n
        self.opened = np.zeros((n, n), dtype=bool)
        self.openSites = 0
        self.top = n * n
        self.bottom = n * n + 1
        self.uf = WeightedQuickUnionUF(n * n + 2)
        self.ufTop = WeightedQuickUnionUF(n * n + 1)

    def validate(self, row, col):
        if not (1 <= row <= self.n and 1 <= col <= self.n):
            raise IndexError('site ({}, {}) outside of grid 1..{}'.format(row, col, self.n))

    def index(self, row, col):
        return (row - 1) * self.n + (col - 1)

    def open(self, row, col):
        """Open site (*row*, *col*) if it is not open already."""
        self.validate(row, col)
        if self.opened[row - 1, col - 1]:
            return
        self.opened[row - 1, col - 1] = True
        self.openSites += 1
        site = self.index(row, col)
        if row == 1:
            self.uf.union(site, self.top)
            self.ufTop.union(site, self.top)
        if row == self.n:
            self.uf.union(site, self.bottom)
        for nbRow, nbCol in (row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1):
            if 1 <= nbRow <= self.n and 1 <= nbCol <= self.n and self.opened[nbRow - 1, nbCol - 1]:
                neighbor = self.index(nbRow, nbCol)
                self.uf.union(site, neighbor)
                self.ufTop.union(site, neighbor)

    def isOpen(self, row, col):
        self.validate(row, col)
        return bool(self.opened[row - 1, col - 1])

    def isFull(self, row, col):
        """Is site (*row*, *col*) open and connected to the top row?"""
        return self.isOpen(row, col) and self.ufTop.connected(self.index(row, col), self.top)

    def numberOfOpenSites(self):
        return self.openSites

    def percolates(self):
        return self.uf.connected(self.top, self.bottom)

    def __str__(self):
        return '\n'.join(''.join('.' if site else '#' for site in row) for row in self.opened)
