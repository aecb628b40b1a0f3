from setuptools import setup, find_packages
import pathlib

# Detect layout
use_src = pathlib.Path("src/csv2openapi").exists()
pkg_args = {"package_dir": {"": "src"}, "packages": find_packages(where="src")} if use_src \
           else {"packages": find_packages(where=".")}

setup(
    name="csv-to-openapi",
    version="0.1.0",
    description="Infer a schema from a CSV file and emit an OpenAPI description",
    python_requires=">=3.8",
    include_package_data=True,
    install_requires=[
        "typer>=0.9",
        "PyYAML>=6.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "csv2openapi=csv2openapi.cli:app",
        ],
    },
    **pkg_args
)
