# setup.py
from setuptools import setup, find_packages

setup(
    name="sitemapper",
    version="0.1.0",
    description="Asynchronous single-domain crawler that prints a site's link tree",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"sitemapper": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "Jinja2>=3.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["sitemapper=sitemapper.cli:cli"],
    },
    python_requires=">=3.11",
)
