from setuptools import find_packages, setup

setup(
    name="littlesearch",
    version="0.1.0",
    packages=find_packages(include=["littlesearch", "littlesearch.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={"test": ["pytest"]},
)
