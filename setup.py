from setuptools import setup, find_packages

setup(
    name="ascii-rectangles",
    version="0.1.0",
    description="Decompose ASCII box drawings into the rectangles they are made of",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "pyyaml>=5.4.0",
        "tqdm>=4.62.0",
        "matplotlib>=3.4.0",
    ],
    extras_require={
        "dev": ["pytest>=6.2.0", "black>=21.0", "flake8>=3.9.0"],
    },
)
