#!/usr/bin/env python3
"""
Setup configuration for GS1 Label Toolkit
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="gs1-label-toolkit",
    version="1.0.0",
    author="GS1 Label Team",
    author_email="",
    description="GS1 check digits, SSCC generation and GS1-128 element strings for logistic labels",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourrepo/gs1-label-toolkit",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples", "scripts"]),
    python_requires=">=3.8",
    install_requires=[
        "python-dateutil>=2.8.2",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gs1-label=gs1_label.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    keywords="gs1 barcode gs1-128 sscc gtin check-digit logistics label",
    project_urls={
        "Documentation": "https://github.com/yourrepo/gs1-label-toolkit/docs",
        "Source": "https://github.com/yourrepo/gs1-label-toolkit",
        "Tracker": "https://github.com/yourrepo/gs1-label-toolkit/issues",
    },
)
