# setup.py
from setuptools import setup, find_packages

setup(
    name="telescope",
    version="0.1.0",
    description="A small interactive interpreter for a Lisp-family expression language",
    packages=find_packages(include=["telescope", "telescope.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["telescope=telescope.repl:main"],
    },
    zip_safe=False,
)
