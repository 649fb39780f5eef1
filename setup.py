from setuptools import setup, find_packages


def readme():
    with open("README.md") as f:
        return f.read()


setup(
    name="tncircuit",
    version="0.1.0",
    description="Quantum circuits as tensor network graphs.",
    long_description=readme(),
    long_description_content_type="text/markdown",
    license="Apache",
    packages=find_packages(exclude=["deps", "tests*"]),
    install_requires=[
        "autoray>=0.6.7",
        "cytoolz>=0.8.0",
        "numba>=0.39",
        "numpy>=1.17",
        "scipy>=1.0.0",
        "tqdm>=4",
    ],
    extras_require={
        "tensor": [
            "networkx>=2.3",
        ],
        "tests": [
            "coverage",
            "pytest",
            "pytest-cov",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    keywords="quantum circuits tensor networks svd",
)
