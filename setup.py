from setuptools import setup, find_packages

setup(
    name="courier-sdk",
    version="0.1.0",
    description="Python SDK for blocking JSON-over-HTTP requests with typed results",
    author="Courier Team",
    packages=find_packages(include=["courier", "courier.*"]),
    install_requires=[
        "httpx>=0.27.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "structlog>=23.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    python_requires=">=3.10",
)
