from setuptools import find_packages, setup


setup(
    name="herald-interpolator",
    version="1.0.0",
    description="Interpolación de placeholders con heraldo y árbol de prefijos",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
)
