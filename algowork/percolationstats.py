# -*- coding: utf-8 -*-
# Copyright 2015 Michael Helmling
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation

"""Monte Carlo estimation of the percolation threshold.

Each trial starts from an *n*-by-*n* grid of blocked sites and opens sites chosen uniformly at
random until the system percolates. The fraction of open sites at that moment is the trial's
percolation threshold. Mean, sample standard deviation and a 95% confidence interval of the
threshold are reported over all trials.

Usage::

    python -m algowork.percolationstats gridsize ntrials
"""

import logging
import os
import sys

import numpy as np

from algowork.percolation import Percolation
from algowork.utils import StopWatch

logger = logging.getLogger(name="percolationstats")

#: 97.5th percentile of the standard normal distribution
CONFIDENCE_95 = 1.96


class PercolationStats:
    """Performs *trials* independent experiments on an *n*-by-*n* percolation system.

    All trials run in the constructor; the statistics are computed on first request and cached.

    :param int n: grid dimension
    :param int trials: number of experiments
    :param seed: seed for the site selection; ``None`` gives a nondeterministic run
    :param systemClass: percolation system type, called as ``systemClass(n)`` per trial. It must
        provide ``open(row, col)`` (idempotent, 1-based), ``percolates()`` and
        ``numberOfOpenSites()``.
    """

    def __init__(self, n, trials, seed=None, systemClass=Percolation):
        if n <= 0 or trials <= 0:
            raise ValueError('n and trials must be positive, got n={}, trials={}'.format(n, trials))
        self._n = n
        self._trials = trials
        self._mean = None
        self._stddev = None
        self._confidenceLow = None
        self._confidenceHigh = None
        random = np.random.RandomState(seed)
        results = np.empty(trials, dtype=np.double)
        timer = StopWatch()
        timer.start()
        for i in range(trials):
            system = systemClass(n)
            while not system.percolates():
                row = random.randint(1, n + 1)
                col = random.randint(1, n + 1)
                system.open(row, col)
            results[i] = system.numberOfOpenSites() / (n * n)
            logger.debug('trial {}: threshold {}'.format(i, results[i]))
        self.time = timer.stop()
        results.flags.writeable = False
        self._results = results
        logger.info('{} trials on {}x{} grid took {:.3f}s'.format(trials, n, n, self.time))

    @property
    def n(self):
        return self._n

    @property
    def trials(self):
        return self._trials

    @property
    def results(self):
        """Read-only array of the per-trial percolation thresholds."""
        return self._results

    def mean(self):
        """Sample mean of the percolation threshold."""
        if self._mean is None:
            self._mean = float(np.mean(self._results))
        return self._mean

    def stddev(self):
        """Sample standard deviation of the percolation threshold; NaN for a single trial."""
        if self._stddev is None:
            if self._trials == 1:
                self._stddev = np.nan
            else:
                self._stddev = float(np.std(self._results, ddof=1))
        return self._stddev

    def confidenceLow(self):
        """Low endpoint of the 95% confidence interval."""
        if self._confidenceLow is None:
            self._confidenceLow = self.mean() - CONFIDENCE_95 * self.stddev() / np.sqrt(self._trials)
        return self._confidenceLow

    def confidenceHigh(self):
        """High endpoint of the 95% confidence interval."""
        if self._confidenceHigh is None:
            self._confidenceHigh = self.mean() + CONFIDENCE_95 * self.stddev() / np.sqrt(self._trials)
        return self._confidenceHigh

    def __str__(self):
        return ('mean                    = {}\n'
                'stddev                  = {}\n'
                '95% confidence interval = [{:f}, {:f}]').format(self.mean(), self.stddev(),
                                                                  self.confidenceLow(),
                                                                  self.confidenceHigh())


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 2:
        print('Usage: percolationstats gridsize ntrials')
        return 0
    try:
        n, trials = int(argv[0]), int(argv[1])
    except ValueError as e:
        print('percolationstats: {}'.format(e), file=sys.stderr)
        return 2
    level = logging.getLevelName(os.environ.get('ALGOWORK_LOGLEVEL', 'WARNING').upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level)
    try:
        stats = PercolationStats(n, trials)
    except ValueError as e:
        print('percolationstats: {}'.format(e), file=sys.stderr)
        return 2
    print(stats)
    return 0


if __name__ == '__main__':
    sys.exit(main())
