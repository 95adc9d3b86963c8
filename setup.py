from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="tabalign",
    version="0.1.0",
    description="Column-aligned output for tab-separated text with terminal styles",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"tabalign": ["py.typed"]},
    python_requires=">=3.8",
    install_requires=[
        "typing_extensions>=4.0.0",
        "pyyaml",
        "wcwidth",
    ],
    extras_require={
        "testing": [
            "pytest",
            "pytest-cov",
            "termcolor>=2.1.0",
        ],
        "type-checking": [
            "mypy",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
