from setuptools import find_packages, setup

with open("README.rst") as f:
    long_description = f.read()

setup(
    name="gwgis",
    version="0.1.0",
    description="GIS utilities for groundwater models",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="MIT",
    packages=find_packages(exclude=["examples"]),
    package_dir={"gwgis": "gwgis"},
    test_suite="gwgis.tests",
    python_requires=">=3.10",
    install_requires=[
        "affine<3",
        "geopandas",
        "h5py",
        "loguru",
        "matplotlib",
        "numpy",
        "pandas",
        "rasterio>=1.3",
        "shapely>=2",
        "xarray",
    ],
    extras_require={
        "dev": [
            "black",
            "pytest",
            "pytest-cov",
        ],
    },
    classifiers=[
        # https://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Hydrology",
        "Topic :: Scientific/Engineering :: GIS",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
    keywords="modflow groundwater gis raster hdf5",
)
