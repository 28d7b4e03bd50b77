"""
nuclide-chart Setup Script
==========================
Chart of Nuclides renderer: nuclide table -> interactive SVG chart
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="nuclide-chart",
    version="1.0.0",
    author="nuclide-chart Team",
    description="Render a chart of nuclides with decay-mode colouring and magic-number gridlines",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["nuclide_chart", "nuclide_chart.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",
        "Topic :: Scientific/Engineering :: Physics",
        "Topic :: Scientific/Engineering :: Visualization",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0,<3",
        "matplotlib>=3.7.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
    },
    keywords="nuclear physics chart-of-nuclides isotopes decay svg visualization",
)
