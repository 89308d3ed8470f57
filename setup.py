# setup.py
from setuptools import setup, find_packages

setup(
    name="schemy",
    version="0.1.0",
    description="A small tree-walking interpreter for a Scheme-like language",
    packages=find_packages(include=["schemy", "schemy.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest", "hypothesis"]},
    zip_safe=False,
)
