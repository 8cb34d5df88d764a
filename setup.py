# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.1.0",
    description="A small Lisp with Q-Expressions: value model, environments and a tree-walking evaluator",
    python_requires=">=3.11",
    packages=find_packages(include=["lispy", "lispy.*"]),
    package_data={"lispy": ["prelude/*.lspy"]},
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispy=lispy.__main__:main"],
    },
    zip_safe=False,
)
