"""Setup configuration for MultiSelect Spinner"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="multiselect-spinner",
    version="1.0.0",
    author="MultiSelect",
    description="Single-line drop-down control for selecting several options",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["multiselect", "multiselect.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.6.1",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.3",
            "pytest-qt>=4.2.0",
            "black>=23.12.1",
            "flake8>=6.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "multiselect-demo=multiselect.main:main",
        ],
    },
)
