from setuptools import setup, find_packages

__version__ = "0.1.0"

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="simulated-flight-hardware",
    version=__version__,
    author="Your Name",
    author_email="your.email@example.com",
    description="Deterministic multirotor hardware simulation: rigid body, motors, battery and sensors",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/simulated-flight-hardware",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"simulation.config": ["*.yaml"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "pyyaml>=5.4",
        "dataclasses-json>=0.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
        ],
    },
    zip_safe=False,
)
