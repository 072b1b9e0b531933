#!/usr/bin/env python3
"""
Render Engine Setup
"""

import os

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))

# Read requirements from requirements.txt
with open(os.path.join(here, 'requirements.txt')) as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read long description from README.md
with open(os.path.join(here, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="render-engine",
    version="0.1.0",
    description="A minimal HTML/CSS style, block layout and paint pipeline",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["render_engine", "render_engine.*"]),
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "render-engine=render_engine.main:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Markup :: HTML",
        "Topic :: Multimedia :: Graphics",
    ],
    keywords="html, css, layout, rendering, cascade",
)
