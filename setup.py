#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright 2023 Ocean Protocol Foundation
# SPDX-License-Identifier: Apache-2.0
#

"""The setup script."""

from setuptools import find_packages, setup

# Installed by pip install -e .
install_requirements = [
    "enforce_typing",
    "eth-account",
    "py-solc-x",
    "requests",
    "web3>=6,<7",
]

test_requirements = [
    "coverage",
    "hexbytes",
    "pytest",
    "pytest-env",
]

dev_requirements = [
    "black",
    "bumpversion",
    "mypy",
    "pylint",
    "types-requests",
]

setup(
    author="oceanprotocol",
    author_email="devops@oceanprotocol.com",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3.8",
    ],
    description="Behavioral tests for an unlimited-allowance ERC20 token.",
    extras_require={
        "test": test_requirements,
        "dev": test_requirements + dev_requirements,
    },
    install_requires=install_requirements,
    license="Apache Software License 2.0",
    include_package_data=True,
    name="uat-py",
    packages=find_packages(include=["uat_py", "uat_py.*"]),
    test_suite="uat_py",
    # fmt: off
    # bumpversion needs single quotes
    version='0.0.1',
    # fmt: on
    zip_safe=False,
)
