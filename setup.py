from setuptools import setup, find_packages

setup(
    name="hr-cache",
    version="1.0.0",
    description="Keyed TTL response cache with pattern invalidation for the HR attendance client",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[
        "click>=8.0.0",
        "pyyaml>=6.0.0",
        "rich>=13.0.0",
        "python-json-logger>=2.0.7",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "hrcache=hrcache.cli.main:main",
        ],
    },
    python_requires=">=3.11",
)
