#!/usr/bin/env python
"""Setup script for colorconv. Command-line scripts are detected automatically
from the modules in ``colorconv/bin`` and installed as console entry points.
"""
import os
from setuptools import setup, find_packages

colorconv_version = "0.1.0"


#===============================================================================
# Package metadata
#===============================================================================

with open("README.rst") as f:
    long_description = f.read()

install_requires = [
    "numpy>=1.9.4",
    "termcolor",
]

tests_require = [
    "pytest",
]


def get_scripts():
    """Detect command-line scripts automatically

    Returns
    -------
    list
        list of strings describing command-line scripts
    """
    binscripts = [
        X.replace(".py", "") for X in filter(
            lambda x: x.endswith(".py") and  "__init__" not in x,
            os.listdir(os.path.join("colorconv",  "bin")),
        )
    ]
    return ["%s = colorconv.bin.%s:main" % (X, X) for X in binscripts]


#===============================================================================
# Program body
#===============================================================================

setup(

    name             = "colorconv",
    version          = colorconv_version,
    long_description = long_description,
    long_description_content_type = "text/x-rst",

    description      = "Convert colors between fractional data-file format and HTML color codes",
    license          = "BSD 3-Clause",
    keywords         = "color conversion hex html rgb",
    platforms        = "OS Independent",

    classifiers      = [
         'Development Status :: 4 - Beta',
         'Programming Language :: Python :: 3',

         'Topic :: Text Processing',
         'Topic :: Utilities',

         'Intended Audience :: Developers',

         'License :: OSI Approved :: BSD License',
         'Operating System :: POSIX',
         'Natural Language :: English',
    ],

    zip_safe = False,
    packages = find_packages(include=["colorconv", "colorconv.*"]),

    entry_points = {
        "console_scripts" : get_scripts()
    },

    install_requires = install_requires,
    extras_require   = {
        "test" : tests_require,
    },

) # yapf: disable
