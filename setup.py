# setup.py
from setuptools import setup, find_packages

setup(
    name="interner",
    version="0.1.0",
    description="General purpose object interner with time/space storage modes and a thread-safe decorator",
    packages=find_packages(include=["interner", "interner.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    zip_safe=False,
)
