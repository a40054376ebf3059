"""
setup.py

Установка пакета.

Использование:
    pip install -e .[test]
    pytest
"""

from setuptools import setup, find_packages

setup(
    name="abalone_engine",
    version="1.0.0",
    description="Abalone (lite) board engine with minimax machine opponent",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "abalone=main:main",
        ],
    },
    zip_safe=False,
)
