"""Setup script for DStat"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
this_directory = Path(__file__).parent
long_description = ""
readme_path = this_directory / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

setup(
    name="dstat",
    version="0.4.0",
    author="Walter G Davies",
    author_email="",
    description="Quickly gather and print directory statistics",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ASCCON/DStat",
    project_urls={
        "Bug Tracker": "https://github.com/ASCCON/DStat/issues",
        "Source Code": "https://github.com/ASCCON/DStat",
    },
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "Topic :: System :: Filesystems",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "typer>=0.9.0",
        "rich>=13.0.0",
        "tomli>=1.1.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dstat=dstat.cli:app",
        ],
    },
    keywords="directory statistics file types filesystem cli",
)
