from setuptools import setup, find_packages

setup(
    name="playlist-csv",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "typer",
        "rich",
        "toolz",
        "PyYAML",
        "pymonad>=2.4.0",
        "requests",
        "beautifulsoup4",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
        "dev": [
            "pytest",
            "pytest-mock",
            "ruff",
            "setuptools",
            "wheel",
            "twine",
        ],
    },
    entry_points={
        "console_scripts": [
            "playlist-csv = playlist_csv.cli:app",
        ],
    },
    description="A CLI tool to export the tracks of a public Spotify playlist as CSV.",
    long_description=open("README.adoc", encoding="utf-8").read(),
    long_description_content_type="text/asciidoc",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Multimedia :: Sound/Audio",
        "Topic :: Internet :: WWW/HTTP",
    ],
    python_requires=">=3.9",
)
