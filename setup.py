from setuptools import setup, find_packages
from os import environ
import sys
from pathlib import Path

# needed for isolated environment
sys.path.insert(0, str(Path(__file__).parent.resolve()))
from runningmoments.moments_config import moments_version
sys.path.pop(0)

# If we're testing packaging, build using a ".devN" suffix in the version number,
# so that we can upload new files (as testpypi/pypi don't allow re-uploading files with
# the same name as previously uploaded).
# Numbering scheme: https://www.python.org/dev/peps/pep-0440
dev_build = ('.dev' + environ['DEV_BUILD']) if 'DEV_BUILD' in environ else ''

setup(
    name="runningmoments",
    version=moments_version + dev_build,
    description="Streaming mean, variance, skewness and kurtosis in constant memory, with parallel merge",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "rich>=12.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "runningmoments = runningmoments.__main__:main",
        ],
    },
    include_package_data=True,
)
