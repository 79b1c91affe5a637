#!/usr/bin/python3
# Setup file for repodir
# Copyright (C) 2024 The repodir authors
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later

from setuptools import setup

setup(
    name="repodir",
    version="0.3.0",
    description="Clone git repositories into a tree mirroring their location",
    license="Apache-2.0 OR GPL-2.0-or-later",
    packages=["repodir"],
    python_requires=">=3.10",
    install_requires=["dulwich>=0.22.0"],
    entry_points={
        "console_scripts": ["repodir=repodir.cli:_main"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "Operating System :: Microsoft :: Windows",
        "Topic :: Software Development :: Version Control",
    ],
)
