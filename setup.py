from setuptools import setup, find_packages

setup(
    name="aws_client_factory",
    version="1.0.0",
    description="Memoizing boto3 client factory with a shared clock offset",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["aws_client_factory", "aws_client_factory.*"]),
    python_requires=">=3.9",
    install_requires=[
        "boto3>=1.26.0",
        "botocore>=1.29.0",
    ],
    extras_require={
        "tests": ["pytest>=7.0"],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: System :: Distributed Computing",
    ],
)
