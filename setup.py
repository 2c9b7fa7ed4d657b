from setuptools import find_packages, setup

setup(
    name="mongowrap",
    version="0.1.0",
    description="Session and CRUD convenience layer over pymongo",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pymongo>=4.0",  # MongoDB driver (bson ObjectId included)
        "mongomock",  # In-memory MongoDB backend
        "pydantic>=2.0",  # Configuration and typed documents
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
)
