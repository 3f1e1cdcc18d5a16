# SPDX-FileCopyrightText: 2026 Share Recovery contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="decoy-share-recovery",
    version="0.1.0",
    description="Recover threshold secrets from polynomial shares mixed with decoys",
    author="Share Recovery contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "tqdm>=4.66.0",
    ],
    extras_require={
        # test tooling
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "share-recovery=share_recovery.cli:main",
        ],
    },
)
