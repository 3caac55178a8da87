"""Setup module for this Python package."""
import pathlib

from setuptools import find_packages, setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()

INSTALL_REQUIRES = [
    "earthengine-api>=0.1.370",
    "folium>=0.15",
    "ipython",
    "ipywidgets>=8.0",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest>=7",
        "pytest-bdd>=6",
    ],
}

setup(
    name="gee_map_tools",
    version="0.1.0",
    description="Interactive area calculator and coordinate navigator on Google Earth Engine maps.",
    long_description=README,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=("tasks",)),
    python_requires=">=3.8",
    license="MIT",
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    include_package_data=True,
)
