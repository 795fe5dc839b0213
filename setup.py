#!/usr/bin/env python3
"""
calcparse
Scanner, two-tier precedence parser and evaluator for arithmetic expressions.
"""

from setuptools import setup, find_packages
import os
import re
import sys

# Ensure Python 3.8+
if sys.version_info < (3, 8):
    raise RuntimeError("calcparse requires Python 3.8 or later")

# Read version from __init__.py
here = os.path.abspath(os.path.dirname(__file__))
version_file = os.path.join(here, "calcparse", "__init__.py")
with open(version_file, encoding="utf-8") as f:
    version_match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
version = version_match.group(1) if version_match else "0.1.0"

# Read README
readme_file = os.path.join(here, "README.md")
with open(readme_file, "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="calcparse",
    version=version,
    description="Arithmetic expression scanner, two-tier precedence parser and evaluator",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Compilers",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords=["parser", "tokenizer", "expression", "operator-precedence", "calculator"],
    zip_safe=False,
)
