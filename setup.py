# -*- coding: utf-8 -*-

from setuptools import find_packages, setup
from pathlib import Path

this_dir = Path(__file__).resolve().parent
readme_path = this_dir / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

setup(
    name="eachline",
    version="0.1",
    description="Lazy line iteration over binary streams with custom separators and length limits",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="ISC",
    packages=find_packages(exclude=["tests"]),
    package_data={"eachline": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
    platforms="any",
    python_requires=">=3.9",
    install_requires=[
        "click",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "eachline=eachline.cli:cli",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Development Status :: 4 - Beta",
    ],
)
