"""setuptools setup for TickTock.

Install for development:
    pip install -e ".[test]"
"""

from setuptools import setup, find_packages

setup(
    name="ticktock",
    version="0.1.0",
    description="Terminal countdown timer with a start/stop progress bar",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.11",
    install_requires=[
        "PyQt6>=6.4",
        "rich>=13.0",
        "textual>=0.86",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "ticktock=ticktock.__main__:main",
        ],
    },
)
