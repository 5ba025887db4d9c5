import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pathstar",
    version="0.1.0",
    description="Graph-agnostic asynchronous A* pathfinding.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["pathstar", "pathstar.*"]),
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "frozendict>=2.3.8",
        "typing_extensions",
    ],
    extras_require={
        "test": [
            "numpy",
            "parameterized",
            "pytest",
        ],
    },
)
