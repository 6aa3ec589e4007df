# setup.py
from setuptools import setup, find_packages

setup(
    name="skeme",
    version="0.1.0",
    description="Evaluator core for a minimal Scheme-like language",
    packages=find_packages(include=["skeme", "skeme.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    zip_safe=False,
)
