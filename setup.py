# setup.py
from setuptools import setup, find_packages

setup(
    name="schemer",
    version="0.1.0",
    description="A small interpreter for a Scheme-like language",
    packages=find_packages(include=["schemer", "schemer.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["schemer = schemer.__main__:main"],
    },
    zip_safe=False,
)
