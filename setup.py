#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

import os

from setuptools import find_packages, setup  # type: ignore

with open("requirements.txt") as req_file:
    requirements = req_file.read().splitlines()


with open("README.md", "r") as f:
    long_description = f.read()

about: dict = {}
with open(os.path.join("spiprog", "__version__.py")) as f:
    exec(f.read(), about)  # pylint: disable=exec-used

extras_require = {
    "tests": ["pytest>=7.4", "importlib-metadata"],
}

setup(
    name="spiprog",
    version=about["__version__"],
    description="AVR in-system programmer over the Linux spidev SPI interface",
    author="NXP",
    license="BSD-3-Clause",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms="Linux",
    python_requires=">=3.9",
    install_requires=requirements,
    include_package_data=True,
    package_data={"spiprog": ["data/parts/*.yaml"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
        "License :: OSI Approved :: BSD License",
        "Topic :: Software Development :: Embedded Systems",
        "Topic :: System :: Hardware",
        "Topic :: Utilities",
    ],
    packages=find_packages(exclude=["tests.*", "tests"]),
    entry_points={
        "console_scripts": [
            "spiprog=spiprog.apps.spiprog:safe_main",
        ],
    },
    extras_require=extras_require,
)
