"""Setup script for Genetics"""

from setuptools import find_packages, setup

with open("requirements.txt") as f:
    requirements = [
        line.strip() for line in f if line.strip() and not line.startswith("#")
    ]

setup(
    name="genetics",
    version="0.1.0",
    description="Generic genetic algorithm engine for real-valued chromosomes",
    packages=find_packages(exclude=["tests*"]),
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "dev": ["pytest", "pytest-mock", "black", "isort", "mypy"],
    },
)
