from setuptools import setup, find_packages

setup(
    name="seam-rpc",
    version="0.1.0",
    description="seam-rpc - client-side JSON-RPC 2.0 transports (HTTP, ZeroMQ)",
    author="Oppie.xyz Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    install_requires=[
        "httpx>=0.25.0",
        "pyzmq>=24.0.0",
        "opentelemetry-api>=1.14.0",
        "opentelemetry-sdk>=1.14.0",
        "opentelemetry-exporter-otlp>=1.14.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-benchmark",
            "pytest-cov",
            "black",
            "isort",
            "pylint",
        ],
    },
    python_requires=">=3.10",
)
