from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e .[test]'
"""

INSTALL_REQUIRES = [
    "msgspec>=0.18",
]

EXTRAS_REQUIRE = {
    "examples": ["numpy>=1.26"],
    "test": ["pytest>=8.0", "numpy>=1.26"],
}


setup(
    name="pewbench",
    version="0.3.0",
    description="Micro-benchmarking harness with a pausable CPU-time clock",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    entry_points={
        "console_scripts": [
            "pew-transpose=pewbench.transpose:main",
        ],
    },
)
