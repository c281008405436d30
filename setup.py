from setuptools import setup, find_namespace_packages

setup(
    name="c2c",
    version="0.1.0",
    packages=find_namespace_packages(where="src", include=["c2c*"]),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "click>=8.0",
        "docker>=7.0",
        "requests>=2.26",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "c2c=c2c.CLI.main:main",
        ],
    },
)
