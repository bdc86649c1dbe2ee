from setuptools import setup, find_packages

setup(
    name="FunctionApproximators",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.7, <4",
    install_requires=["numpy", "scipy"],
    extras_require={
        "test": ["pytest"],
    },
)
