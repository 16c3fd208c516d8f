# setup.py
from setuptools import setup, find_packages

setup(
    name="reduct",
    version="0.1.0",
    description="A homoiconic expression language built on a single table value",
    packages=find_packages(include=["reduct", "reduct.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["reduct=reduct.interpreter:main"],
    },
    zip_safe=False,
)
