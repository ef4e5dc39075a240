from setuptools import setup, find_packages


setup(
    name="pwcipher",
    version="0.1",
    packages=find_packages(include=["pwcipher", "pwcipher.*"]),
    description="Password-based encryption and {decoration} of secrets stored in configuration files.",
    author="pwcipher developers",
    python_requires=">=3.8",
    install_requires=[
        "pycryptodomex>=3.23.0",
    ],
    entry_points={
        "console_scripts": [
            "pwcipher=pwcipher.cli:main",
        ]
    },
)
