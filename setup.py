from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="keycount",
    version="0.1.0",
    description="Sum the frequencies of repeated keys in a key,value text file.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["keycount=keycount.cli:main"]},
)
