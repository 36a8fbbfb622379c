from setuptools import setup, find_packages

setup(
    name="cookiemilk",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run"],
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "gymnasium",  # Environment wrapper for agents
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
)
