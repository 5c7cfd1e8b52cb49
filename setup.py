#!/usr/bin/env python3
"""Setup script for the tablegrid layout reconstruction package."""

from setuptools import find_packages, setup

setup(
    name="tablegrid",
    version="1.0.0",
    description=(
        "Geometric clustering of PDF text fragments and rulings into lines, "
        "columns and table grids."
    ),
    packages=find_packages(include=["tablegrid", "tablegrid.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numba",
        "numpy",
        "pymupdf",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
