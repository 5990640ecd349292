from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="slyce",
    version="0.1.0",
    description="Python's slicing rules for any sequence, with reusable head and tail relative indexes.",
    packages=["slyce", "slyce._src"],
    python_requires=">=3.9",
    install_requires=["click>=8.0"],
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["slyce=slyce.__main__:main"]},
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
