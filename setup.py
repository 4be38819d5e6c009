"""
scaledtimer - Scaled elapsed-time accumulator
Pausable stopwatch with global/custom time scaling and clock-style formatting
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="scaledtimer",
    version="1.0.0",
    author="scaledtimer Contributors",
    description="Pausable elapsed-time accumulator with time scaling and formatting",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
    install_requires=[
        "loguru>=0.6.0",
        "PyYAML>=5.4",
    ],
    extras_require={
        "dev": ["pytest>=6.0", "black", "isort", "flake8"],
    },
)
