from setuptools import find_packages, setup

setup(
    name="odxproxy-client",
    version="0.1.0",
    packages=find_packages(include=["odxproxy", "odxproxy.*"]),
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.5",
        "structlog>=23.1",
        "typing-extensions>=4.6",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "pytest-httpx>=0.30",
        ],
    },
    author="Your Name",
    author_email="your.email@example.com",
    description="Typed async client for the ODX proxy in front of Odoo.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
