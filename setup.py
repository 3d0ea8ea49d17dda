#!/usr/bin/env python3
"""Setup script for the Nahawi Arabic light stemmer."""

from setuptools import setup, find_packages

setup(
    name="nahawi-stemmer",
    version="1.0.0",
    description="Arabic light stemmer and root extractor",
    author="Nahawi Team",
    python_requires=">=3.9",
    packages=find_packages(),
    package_data={
        "nahawi_stemmer": ["resources/*.json"],
    },
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "flake8",
        ],
    },
    entry_points={
        "console_scripts": [
            "nahawi-stem=nahawi_stemmer.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
    ],
)
