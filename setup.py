# setup.py
from setuptools import setup, find_packages

setup(
    name="tailscheme",
    version="0.1.0",
    description="Tree-walking evaluator for a small applicative Scheme with tail-call elimination",
    packages=find_packages(include=["tailscheme", "tailscheme.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tailscheme=tailscheme.__main__:main"],
    },
    zip_safe=False,
)
