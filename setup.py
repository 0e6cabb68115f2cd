# setup.py
from setuptools import setup, find_packages

setup(
    name="dndlib",                    # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),   # dndlib/ and dndlib.resources/
    python_requires=">=3.9",
    install_requires=["pandas"],      # roll-table frames and validation reports
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["dndlib-validate=dndlib.cli:main"],
    },
    description="Typed data models and validation for D&D reference data",
    author="Your Name",
    license="MIT",
)
