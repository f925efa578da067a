# setup.py
from setuptools import setup, find_packages

setup(
    name="byol",
    version="0.0.1",
    description="A small Lisp with S-Expressions, Q-Expressions and a flat global environment",
    packages=find_packages(include=["byol", "byol.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyparsing>=3.1",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["byol = byol.cmdline:main"],
    },
    zip_safe=False,
)
