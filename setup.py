# setup.py
from setuptools import setup, find_packages

setup(
    name="tatu",
    version="0.3.0",
    description="Tatu, a small S-expression language with a tree-walking interpreter",
    packages=find_packages(include=["tatu", "tatu.*", "tatu_lsp", "tatu_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.0,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "tatu=tatu.cli:main",
            "tatu-ls=tatu_lsp.server:main",
        ],
    },
    zip_safe=False,
)
