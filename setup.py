"""
Setup configuration for CatalogSync
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="catalogsync",
    version="1.0.0",
    author="CatalogSync Team",
    description="Bulk edit engine and API for a Squarespace product catalog",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["catalogsync", "catalogsync.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Framework :: FastAPI",
        "Topic :: Office/Business",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.25.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "cryptography>=41.0.0",
        "motor>=3.3.0",
        "fastapi>=0.110.0",
    ],
    extras_require={
        "server": ["uvicorn[standard]>=0.24.0"],
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    keywords="squarespace commerce catalog bulk-edit api",
)
