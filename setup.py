#!/usr/bin/env python3
# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0

"""Setup script for unifiedlog-formatters."""

from setuptools import setup, find_packages

setup(
    name="unifiedlog-formatters",
    version="0.1.0",
    description="Decode Firehose formatter flags from macOS Unified Log (tracev3) entries",
    author="Aria Akhavan",
    license="Apache-2.0",
    packages=find_packages(include=["unifiedlog_formatters", "unifiedlog_formatters.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
