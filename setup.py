"""doublysure setup - Make sure, sure, and doubly sure."""
from setuptools import setup, find_packages

setup(
    name="doublysure",
    version="0.1.0",
    description="doublysure: confirmation-gated values for dangerous operations",
    packages=find_packages(include=["doublysure", "doublysure.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "doublysure=doublysure.cli.main:cli",
        ],
    },
)
