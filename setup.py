from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="stripe-fake",
    version="0.1.0",
    description="In-memory fake Stripe client for testing code that uses the Stripe Python SDK",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing :: Mocking",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Framework :: Pytest",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        "stripe>=8.0.0",
        "structlog>=23.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "pytest11": [
            "stripe_fake = stripe_fake.pytest_plugin",
        ],
    },
)
