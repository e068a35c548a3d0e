#!/usr/bin/env python3
"""
Clita Programming Language
Front end (tokenizer and recursive descent parser) for the Clita language.
"""

from setuptools import setup, find_packages
import os
import sys

# Ensure Python 3.8+
if sys.version_info < (3, 8):
    raise RuntimeError("Clita requires Python 3.8 or later")

# Read version from __init__.py
here = os.path.abspath(os.path.dirname(__file__))
version_file = os.path.join(here, "clita", "__init__.py")
version = {}
if os.path.exists(version_file):
    with open(version_file) as f:
        for line in f:
            if line.startswith("__version__"):
                exec(line, version)
                break
else:
    version["__version__"] = "0.1.0-alpha"

# Read README
readme_file = os.path.join(here, "README.md")
with open(readme_file, "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="clita",
    version=version.get("__version__", "0.1.0-alpha"),
    description="Tokenizer and recursive descent parser for the Clita language",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="xwest",
    author_email="dev@clita-lang.org",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        # Core has no external dependencies for from-scratch implementation
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "clitac=clita.cli:main",           # Clita front end driver
        ],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
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
    keywords=[
        "programming-language", "compiler", "lexer", "tokenizer", "parser",
        "recursive-descent", "ast"
    ],
    zip_safe=False,
    platforms=["Windows", "Linux", "macOS"],
)
