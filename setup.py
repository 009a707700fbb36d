#!/usr/bin/env python3
"""
Setup script for k6ctl.
"""

import codecs
import os
import re
from setuptools import setup, find_packages


def read(rel_path):
    """Read file content."""
    here = os.path.abspath(os.path.dirname(__file__))
    with codecs.open(os.path.join(here, rel_path), 'r', 'utf-8') as fp:
        return fp.read()


def find_version(rel_path):
    """Extract version from __version__.py file."""
    version_content = read(rel_path)
    version_match = re.search(
        r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
        version_content,
        re.MULTILINE
    )
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


if __name__ == "__main__":
    setup(
        name="k6ctl",
        version=find_version("k6ctl/__version__.py"),
        description="Archive k6 scripts and publish them as Kubernetes ConfigMaps for the k6-operator",
        long_description=read("README.md"),
        long_description_content_type="text/markdown",
        license="MIT",
        packages=find_packages(exclude=["tests*", "docs*", "examples*", "scripts*"]),
        python_requires=">=3.9",
        install_requires=[
            "click>=8.0",
            "rich>=13.0",
            "pyyaml>=6.0",
            "aiofiles>=23.0",
            "jsonschema>=4.0",
            "kubernetes>=28.0",
            "urllib3>=1.26",
            "python-dotenv>=1.0",
        ],
        extras_require={
            "test": [
                "pytest>=7.0",
            ],
        },
        entry_points={
            "console_scripts": [
                "k6ctl=k6ctl.cli.main:main",
            ],
        },
    )
