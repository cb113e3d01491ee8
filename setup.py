from setuptools import setup, find_packages

setup(
    name="uncertain_objects",
    version="1.0.0",
    description=(
        "Uncertain objects with bounded mixture-density sampling "
        "and uncertainification of feature vectors"
    ),
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
        "matplotlib>=3.4",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
