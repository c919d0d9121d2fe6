#!/usr/bin/env python3

from setuptools import find_packages, setup

version = {}
with open("./jsr56/_version.py") as f:
    exec(f.read(), version)

with open("./README.md") as f:
    long_description = f.read()

setup(
    name="jsr56",
    version=version["__version__"],
    license="Apache-2.0",
    description="Version-id comparison and release matching for the JSR 56 version-string grammar",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["test", "test.*"]),
    entry_points={
        "console_scripts": [
            "jsr56 = jsr56._cli:check",
        ]
    },
    platforms="any",
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "pretend",
            "coverage[toml]",
            "hypothesis",
            "icontract",
        ],
        "dev": [
            "bump >= 1.3.1",
            "flake8",
            "black",
            "isort",
            "pytest",
            "pytest-cov",
            "pretend",
            "coverage[toml]",
            "hypothesis",
            "icontract",
            "interrogate",
            "pdoc3",
            "mypy",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
    ],
)
