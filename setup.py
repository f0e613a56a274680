#!/usr/bin/env python3

from setuptools import setup

setup(
    name="pwsmith",
    version="0.1.0",
    description="Random password and passphrase generator with entropy estimates",
    packages=["pwsmith"],
    python_requires=">=3.8",
    install_requires=[
        "blessed",
        "prompt_toolkit",
        "pyperclip",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["pwsmith = pwsmith.main:main"],
    },
)
