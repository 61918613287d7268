#!/usr/bin/env python3
"""Setup script for feed-core."""
from setuptools import find_packages, setup

# Read version from package
with open("src/feed_core/__init__.py", "r") as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break

# Read long description from README
with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="feed-core",
    version=version,
    description="Feed entity, account metadata cache and OPML export for a multi-account feed reader",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="feed-core Team",
    author_email="example@example.com",
    url="https://github.com/example/feed-core",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "feed_core": ["templates/*.j2"],
    },
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
        "jinja2>=3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "feed-core=feed_core.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: News/Diary",
    ],
)
