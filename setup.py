# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Setup configuration for cloud-error-reporting package."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file if it exists
this_directory = Path(__file__).parent
readme_path = this_directory / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")
else:
    long_description = "Client library for reporting application errors to Google Cloud Error Reporting"

setup(
    name="cloud-error-reporting",
    version="0.1.0",
    author="cloud-error-reporting contributors",
    description="Client library for reporting application errors to Google Cloud Error Reporting",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.32.4",  # HTTP transport for events:report
    ],
    extras_require={
        "flask": [
            "flask>=2.3.0",
        ],
        "starlette": [
            "starlette>=0.49.1",
            "fastapi>=0.109.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-mock>=3.10.0",
            "pylint>=3.0.0",
            "mypy>=1.0.0",
        ],
        # Test extra includes every framework for the integration tests
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pytest-mock>=3.10.0",
            "flask>=2.3.0",
            "starlette>=0.49.1",
            "fastapi>=0.109.0",
            "httpx>=0.27.0",  # For starlette's TestClient
        ],
    },
)
