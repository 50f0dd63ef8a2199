# -*- coding: utf-8 -*-
# Copyright 2015 Michael Helmling
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation

import contextlib
import time


class StopWatch:
    """Measures wall-clock time between :func:`start` and :func:`stop`."""

    def __init__(self):
        self.startTime = None
        self.duration = 0.0

    def start(self):
        self.startTime = time.perf_counter()

    def stop(self):
        """Return the seconds elapsed since :func:`start` and store them in :attr:`duration`."""
        if self.startTime is None:
            raise RuntimeError('stopwatch was not started')
        self.duration = time.perf_counter() - self.startTime
        return self.duration


@contextlib.contextmanager
def stopwatch():
    """Context manager timing its body::

        with stopwatch() as timer:
            work()
        print(timer.duration)
    """
    timer = StopWatch()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
