"""A setuptools based setup module.

See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

# Always prefer setuptools over distutils
from setuptools import setup, find_packages

# To use a consistent encoding
from codecs import open
from os import path

# Read some info from the icgem package itself
import icgem

here = path.abspath(path.dirname(__file__))

# Get the long description from the relevant file
with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name=icgem.__name__,
    version=icgem.__version__,
    description=[s.replace("\n", " ") for s in icgem.__doc__.strip().split("\n\n")][0],
    long_description=long_description,
    long_description_content_type="text/markdown",
    # Author details
    author=icgem.__author__,
    author_email=icgem.__contact__,
    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: MacOS",
        "Operating System :: Microsoft",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering",
    ],
    # What does your project relate to?
    keywords="gravity icgem geodesy spherical-harmonics",
    packages=find_packages(exclude=["tests", "tests.*"]),
    # The default configuration is read from the package
    package_data={"icgem": ["config/*.conf"]},
    python_requires=">=3.7",
    # List run-time dependencies here.  These will be installed by pip when your project is installed. For an analysis
    # of "install_requires" vs pip's requirements files see: https://packaging.python.org/en/latest/requirements.html
    install_requires=[
        "colorama",
        # midgard 1.4 uses Python 3.12 f-string syntax
        "midgard>=1.2.0,<1.4; python_version < '3.12'",
        "midgard>=1.2.0; python_version >= '3.12'",
        "numpy",
    ],
    # List additional groups of dependencies here (e.g. development dependencies). You can install these using the
    # following syntax, for example:
    #   $ pip install -e .[dev_tools]
    extras_require={"dev_tools": ["black", "flake8", "mypy", "pytest"]},
)
