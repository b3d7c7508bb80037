"""
blockshuffle: Block-wise Reordering Candidate Trees

Generates the tree of block-wise reorderings of an ordered sequence for an
external evaluator to search:
1. Partitioner and recursive Expander
2. Closed-form candidate count and memory Estimator
3. Fan-out bounding tree Optimizer
4. Depth, size and memory metrics
"""

from setuptools import setup, find_packages

setup(
    name="blockshuffle",
    version="0.1.0",
    description="Block-wise reordering candidate trees with bounded fan-out",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="blockshuffle developers",
    python_requires=">=3.10",
    packages=find_packages(include=["blockshuffle", "blockshuffle.*"]),
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "psutil>=5.9",
        ]
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Build Tools",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
