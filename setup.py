from setuptools import setup, find_packages

setup(
    name="rebalance-calculator",
    version="1.0.0",
    author="Zehnlabs Rebalancer Team",
    description="Exact decimal trade calculation for rebalancing a portfolio to a target index",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "rebalance_calculator": ["py.typed"],
        "app_config": ["py.typed"],
    },
    install_requires=[
        "pydantic==2.11.7",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.11",
)
