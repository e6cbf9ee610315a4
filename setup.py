# setup.py
from setuptools import setup, find_packages

setup(
    name="trigram-count",
    version="0.1.0",
    description="Count word trigrams in a text stream and report the most frequent",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "trigram-count=trigram_count.cli:main",
        ],
    },
)
