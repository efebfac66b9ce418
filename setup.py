# setup.py
from setuptools import setup, find_packages

setup(
    name="risp",
    version="0.1.0",
    packages=find_packages(include=["risp", "risp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["risp = risp.repl:main"],
    },
    zip_safe=False,
)
