# setup.py
from setuptools import setup, find_packages

setup(
    name="sitemap_scan",
    version="1.0.0",
    description="Асинхронный поиск и рекурсивный разбор sitemap сайта",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "lxml>=5.0",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "yarl>=1.9",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "sitemap-scan=sitemap_scan.cli:main",
        ],
    },
    python_requires=">=3.11",
)
