#!/usr/bin/python
# -*- encoding: utf-8 -*-
import ast
import re

from setuptools import find_packages
from setuptools import setup

## Keep the version number available as package.__version__, and
## maintain it in one place only.
_version_re = re.compile(r"__version__\s+=\s+(.*)")
with open("icaljscal/__init__.py", "rb") as f:
    version = str(
        ast.literal_eval(_version_re.search(f.read().decode("utf-8")).group(1))
    )

if __name__ == "__main__":
    test_packages = [
        "pytest",
        "pytest-coverage",
        "coverage",
    ]

    setup(
        name="icaljscal",
        version=version,
        description="Mapping of iCalendar (RFC5545) events to and from JSCalendar (RFC8984) objects",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: Apache Software License",
            "Operating System :: OS Independent",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3",
            "Topic :: Office/Business :: Scheduling",
            "Topic :: Software Development :: Libraries " ":: Python Modules",
        ],
        keywords="icalendar jscalendar rfc5545 rfc8984 rfc9253",
        license="Apache-2.0",
        python_requires=">=3.9",
        packages=find_packages(exclude=["tests"]),
        include_package_data=True,
        zip_safe=False,
        install_requires=[
            "icalendar>=6.0",
            "tzlocal",
        ],
        extras_require={
            "test": test_packages,
        },
    )
