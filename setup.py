"""
Setup file.
"""

from pathlib import Path

from setuptools import setup

URL = "https://github.com/zackees/tree-killer"
KEYWORDS = "process tree kill subprocess descendants"
HERE = Path(__file__).parent


if __name__ == "__main__":
    setup(
        maintainer="Zachary Vorhies",
        keywords=KEYWORDS,
        url=URL,
    )
