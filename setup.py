from setuptools import find_packages, setup


setup(
    name="codebundle",
    version="1.0.0",
    description="Bundle source files from a directory tree into a single text file",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "codebundle=codebundle.cli:main",
        ],
    },
)
