# setup.py
from setuptools import setup, find_packages

setup(
    name="mlisp",
    version="0.1.0",
    description="Tree-walking interpreter for a small parenthesized expression language",
    packages=find_packages(include=["mlisp", "mlisp.*"]),
    python_requires=">=3.10",
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["mlisp=mlisp.cli:main"]},
    zip_safe=False,
)
