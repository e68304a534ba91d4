#!/usr/bin/env python3
"""
Setup script for the Retrolambda configuration package.
"""

from setuptools import setup, find_packages

setup(
    name="retrolambda-config",
    version="2.5.7",
    description="System property registry, validation and usage text for Retrolambda",
    author="Retrolambda contributors",
    license="Apache-2.0",
    packages=find_packages(include=["retrolambda", "retrolambda.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "retrolambda=retrolambda.cli.main:app",
        ],
    },
)
