from setuptools import setup, find_packages

setup(
    name="helperkit",  # Package name
    version="0.1.0",  # Version number
    description="Stateless helpers for nested data, grouped option lists, dates and strings.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "python-dotenv",
        "pydantic>=2.0",
        "numpy>=1.21",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
