# setup.py
from setuptools import setup, find_packages

setup(
    name="contact_scout",
    version="0.1.0",
    description="Async website contact scraper: emails, phones, addresses and industries by email domain",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"contact_scout": ["data/*.txt", "templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "Jinja2>=3.1",
        "phonenumbers>=8.13",
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
        "console_scripts": ["contact_scout=contact_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
