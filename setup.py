from setuptools import setup, find_namespace_packages

setup(
    name="clippings2md",
    version="0.1.0",
    packages=find_namespace_packages(include=['cli*', 'clippings*']),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "Click",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "clippings2md=cli.main:main",
        ],
    },
)
