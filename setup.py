"""LogTree setup - Merkle tree commitments over text logs."""
from setuptools import setup, find_packages

setup(
    name="logtree",
    version="1.0.0",
    description="LogTree: Merkle tree commitments over text logs",
    packages=find_packages(include=["logtree", "logtree.*", "logtree_cli", "logtree_cli.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0",
        "blake3>=0.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "logtree=logtree_cli.main:cli",
        ],
    },
)
