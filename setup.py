from setuptools import setup, find_packages

setup(
    name="separation_graph",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "scipy",
        "pandas",
        "matplotlib",
        "numba"
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "separation-graph=separation_graph.__main__:main",
        ],
    },
    author="Connor Frankston",
    description="Degrees of separation across all node pairs of an undirected graph",
    python_requires=">=3.8",
)
