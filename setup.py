from pathlib import Path

from setuptools import find_packages, setup

BASE_PATH = Path(__file__).resolve().parent


# read the version from the particular file
with open(BASE_PATH / "dropletflux" / "version.py", "r") as f:
    exec(f.read())

DOWNLOAD_URL = (
    f"https://github.com/zwicker-group/py-dropletflux/archive/v{__version__}.tar.gz"
)


with open(BASE_PATH / "README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="py-dropletflux",
    package_data={"dropletflux": ["py.typed"]},
    packages=find_packages(include=["dropletflux", "dropletflux.*"]),
    zip_safe=False,  # this is required for mypy to find the py.typed file
    version=__version__,
    license="MIT",
    description=(
        "Python package for calculating the evaporative flux of a pair of "
        "neighboring droplets"
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="David Zwicker",
    author_email="david.zwicker@ds.mpg.de",
    url="https://github.com/zwicker-group/py-dropletflux",
    download_url=DOWNLOAD_URL,
    keywords=["droplets", "evaporation", "contact-line"],
    python_requires=">=3.9",
    install_requires=["matplotlib", "numpy", "numba", "py-pde"],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
