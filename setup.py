import os

from setuptools import find_packages, setup


def read_requirements():
    """
    Reads and processes the requirements file, returning a list of dependencies.

    Excludes blank lines and lines that start with `#` (comments).
    """
    req_file = os.path.join(os.path.dirname(__file__), "requirements.txt")
    with open(req_file, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]


setup(
    name="wizard-validator",
    version="0.1.0",
    packages=find_packages(),
    package_data={"wizard_validator.loaders": ["examples/*.yaml"]},
    install_requires=read_requirements(),  # Load runtime dependencies
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "wizard-validate=wizard_validator.cli:main",
        ],
    },
)
