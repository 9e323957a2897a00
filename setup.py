from setuptools import setup, find_packages

setup(
    name="abacus-abis",
    version="0.1.0",
    description="Extract contract ABIs from compiler build artifacts",
    packages=find_packages(),
    install_requires=[
        "web3>=6.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "abacus-abis=abacus_abis.main:main",
        ],
    },
)
