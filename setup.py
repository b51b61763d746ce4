from setuptools import find_packages, setup

setup(
    name="deltapipe",
    version="0.1.0",
    description="Compressed binary patches with atomic, verifiable outputs",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "bsdiff4",  # Binary delta algorithm
        "zstandard",  # Streaming patch compression
        "pydantic>=2",  # Optimization config validation
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
)
