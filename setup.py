# setup.py
from setuptools import setup, find_packages

setup(
    name="chispa",
    version="0.3.0",
    description="Tree-walking interpreter for the Chispa scripting language",
    packages=find_packages(include=["chispa", "chispa.*"]),
    package_data={"chispa": ["prelude/*.chispa"]},
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "hypothesis"]},
    zip_safe=False,
)
