from setuptools import setup, find_packages

setup(
    name="feedscraper",
    version="1.0.0",
    description="Render scraped social feed items (Twitter/X, Reddit, GitHub) as RSS 2.0",
    author="Factory AI",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dateutil>=2.8.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "feedparser>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "feedscraper=feedscraper.cli:main",
        ],
    },
    python_requires=">=3.9",
)
