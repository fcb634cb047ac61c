#!/usr/bin/env python3
"""
Minimal setup.py for package building only.

All packaging metadata lives in pyproject.toml.
"""

from setuptools import setup

if __name__ == "__main__":
    setup()
