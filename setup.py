#!/usr/bin/env python3

import setuptools

setuptools.setup(
    name = "gmaps_urls",
    version = "1.0.0",
    license = "MIT",
    description = "Validating URL builders for the Google Static Maps and "
                  "Time Zone APIs",
    packages = ["gmaps_urls"],
    python_requires = ">=3.8",
    install_requires = ["googlemaps", "pydantic>=2", "shapely>=2"],
    extras_require = {"test": ["pytest"]}
)
