# -*- coding: utf-8 -*-
# Copyright 2015 Michael Helmling
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation

"""Linked-list deque and Monte Carlo percolation threshold estimation."""

from algowork.deque import Deque, EmptyDequeError
from algowork.percolation import Percolation
from algowork.percolationstats import PercolationStats
from algowork.unionfind import WeightedQuickUnionUF

__version__ = '0.1'
