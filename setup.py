#!/usr/bin/env python3
"""
Monero Wallet RPC Setup Script
Installs the walletrpc package and the walletrpc-cli tool.

Usage:
    pip install .              Install package and CLI
    pip install -e .[test]     Development install with test tools
"""

from setuptools import setup, find_packages

setup(
    name="monero-walletrpc",
    version="0.1.0",
    description="Client library for the monero-wallet-rpc JSON-RPC interface",
    packages=find_packages(exclude=["tests", "tests.*"]),
    scripts=["walletrpc-cli.py"],
    install_requires=[
        "requests>=2.25.0",
        "aiohttp>=3.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
)
