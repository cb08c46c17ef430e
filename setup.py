# SPDX-License-Identifier: Apache-2.0
from setuptools import setup, find_packages

setup(
    name="fhe-ceremony",
    version="0.1.0",
    packages=find_packages(include=["ceremony", "ceremony.*", "ceremony_client", "ceremony_client.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "pydantic>=2",
        "pydantic-settings",
        "slowapi",
        "uvicorn",
        "numpy",
        "requests",
        "click",
    ],
    extras_require={"test": ["pytest", "httpx"]},
    entry_points={"console_scripts": ["ceremony=ceremony_client.cli:main"]},
)
