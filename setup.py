import setuptools

with open("README.md", "r") as f:
    long_description = f.read()

setuptools.setup(
    name="latticetools",
    version="0.1.0",
    author="",
    author_email="",
    description="A software package for counting and enumerating the lattice points of bounded lattice polytopes.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    license="GNU General Public License (GPL)",
    python_requires=">=3.8",
    install_requires=["numpy", "python-flint", "pplpy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License (GPL)",
        "Operating System :: OS Independent",
    ]
)
