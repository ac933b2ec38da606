import setuptools
from setuptools import find_packages

setuptools.setup(
    name="izn",
    version="0.1.0",
    description="Parser for sectioned key/value izn configuration files with typed lookups",
    python_requires=">=3.10",
    packages=find_packages(include=["izn", "izn.*"]),
    install_requires=[],
    extras_require={"test": ["pytest"]},
)
