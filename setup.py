# setup.py

from setuptools import setup, find_packages

setup(
    name="fenwick_tree",
    version="0.1.0",
    description="Generic Fenwick (binary indexed) tree with point updates and range sums",
    packages=find_packages(exclude=["tests*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
