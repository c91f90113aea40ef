from setuptools import setup, find_packages

setup(
    name="tinyc",
    version="0.1.0",
    description="tinyc — s-expression to call-syntax compiler",
    packages=find_packages(include=["tinyc", "tinyc.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tinyc=tinyc.cli:main",
        ],
    },
)
