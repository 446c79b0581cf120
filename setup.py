
from setuptools import setup, find_packages

setup(
    name="c4_beast",
    version="0.1",
    description="Alpha-beta minimax player for gravity-drop four in a row",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
