# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fsgraph",
    version="0.1.0",
    description="Filesystem subtree as a graph: shortest paths and spanning trees over directory containment",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fsgraph*"]),
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'fsgraph=fsgraph.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
