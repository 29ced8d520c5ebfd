#!/usr/bin/env python3
"""
Setup script for ECFP (Extended-Connectivity Fingerprints)
Pure-Python ECFP with Rogers & Hahn duplicate removal and stable 64-bit hashing
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="ecfp",
    version="1.0.0",
    author="ECFP Contributors",
    author_email="",
    description="Extended-Connectivity Fingerprints (ECFP) with bond-coverage duplicate removal",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "numpy>=1.19.0",
        "scipy>=1.5.0",
        "rdkit>=2020.09.1",
        "xxhash>=2.0.0",
        "blake3>=0.3.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ecfp=ecfp.cli:main",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    keywords="molecular-fingerprints ecfp morgan cheminformatics",
    zip_safe=False,
)
