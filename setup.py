# setup.py
from setuptools import setup, find_packages

setup(
    name="plotscript",
    version="0.1.0",
    description="Tree-walking interpreter for the plotscript plotting language",
    packages=find_packages(include=["plotscript", "plotscript.*"]),
    package_data={"plotscript": ["startup.pls"]},
    python_requires=">=3.10",
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["plotscript = plotscript.__main__:main"]},
    zip_safe=False,
)
