#!/usr/bin/env python

from setuptools import setup

version = '0.1.0'

data = dict(
    name = 'sirenentity',
    version = version,
    description = 'sirenentity models Siren hypermedia entities and converts them to and from JSON',
    author = 'David Whyte',
    author_email = 'david@thewhytehouse.org',
    packages =      ['sirenentity'],
    python_requires = '>=3.7',
    install_requires = ['jsonschema>=3.2'],
    extras_require = {'test': ['pytest']},
    package_data = {'sirenentity': ['sirenentity.ini.default']},
    )


setup(**data)
