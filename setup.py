from setuptools import setup, find_packages

setup(
    name="dpsia",
    version="0.1.0",
    packages=find_packages(include=["dpsia", "dpsia.*"]),
    install_requires=[
        "openai>=1.0.0",
        "google-genai>=1.0.0",
        "python-dotenv>=1.0.0",
        "click>=8.1.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "httpx>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dpsia=dpsia.cli:main",
        ]
    },
    description="Parallel multi-provider vendor security research for DPSIA assessments.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Security",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
