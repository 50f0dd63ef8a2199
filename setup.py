#!/usr/bin/python3
# -*- coding: utf-8 -*-
# Copyright 2015 Michael Helmling
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation
import io
import re
from os.path import join, dirname

from setuptools import setup, find_packages


def readVersion():
    """Parses ``__version__`` from the package without importing it (and hence numpy)."""
    with io.open(join(dirname(__file__), 'algowork', '__init__.py'), 'rt', encoding='utf-8') as f:
        init = f.read()
    return re.findall(r"__version__\s*=\s*'([^']+)'", init)[0]


setup(
    name='algowork',
    version=readVersion(),
    author='Michael Helmling',
    author_email='helmling@uni-koblenz.de',
    description='Linked-list deque and Monte Carlo percolation threshold estimation',
    license='GPLv3',
    python_requires='>=3.6',
    install_requires=['numpy'],
    packages=find_packages(exclude=['tests']),
    test_suite='tests',
    entry_points={
        'console_scripts': ['percolationstats = algowork.percolationstats:main'],
    },
)
