from setuptools import setup, find_packages

setup(
    name="therapist",
    version="0.1.0",
    description="Declarative command line argument parser with generated help.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "prompt_toolkit",
        "pydantic>=2",
        "PyYAML",
        "toml",
        "python-dateutil",
        "python-json-logger>=3",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "therapist=therapist.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
    ],
)
