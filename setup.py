# setup.py
from setuptools import setup, find_packages

setup(
    name="littlelisp",
    version="0.1.0",
    description="A minimal Lisp interpreter: reader, lexical environments and a tree-walking evaluator",
    python_requires=">=3.10",
    packages=find_packages(include=["littlelisp", "littlelisp.*"]),
    package_data={"littlelisp": ["prelude/*.lisp"]},
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["littlelisp = littlelisp.interpreter:main"],
    },
    zip_safe=False,
)
