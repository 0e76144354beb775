# SPDX-FileCopyrightText: 2025 Secret Recover contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="secret-recover",
    version="0.1.0",
    description="Recover a threshold-shared secret with exact Lagrange interpolation",
    author="Secret Recover contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "secret-recover=secret_recover.cli:main",
        ],
    },
)
