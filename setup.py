#!/usr/bin/env python
# -*- coding: utf-8 -*-

import importlib.util
from setuptools import setup, find_packages

# Constants
DISTNAME = 'scatnet'
DESCRIPTION = 'Multilayer wavelet scattering networks in 1D, 2D and roto-translation'
LICENSE = 'BSD-3-Clause'


# Parse description
with open('README.md', encoding='utf8') as f:
    README = f.read().split('\n')
    LONG_DESCRIPTION = '\n'.join([x for x in README if not x[:3] == '[!['])


# Parse version.py
scatnet_version_spec = importlib.util.spec_from_file_location(
    'scatnet_version', 'scatnet/version.py')
scatnet_version_module = importlib.util.module_from_spec(scatnet_version_spec)
scatnet_version_spec.loader.exec_module(scatnet_version_module)
VERSION = scatnet_version_module.version


# Parse requirements.txt
with open('requirements.txt', 'r') as f:
    REQUIREMENTS = [line for line in f.read().split('\n') if line.strip()]


setup_info = dict(
    # Metadata
    name=DISTNAME,
    version=VERSION,
    classifiers=['Intended Audience :: Education',
                 'Intended Audience :: Science/Research',
                 'License :: OSI Approved :: BSD License',
                 'Natural Language :: English',
                 'Operating System :: MacOS',
                 'Operating System :: POSIX :: Linux',
                 'Programming Language :: Python :: 3',
                 'Topic :: Multimedia :: Sound/Audio :: Analysis',
                 'Topic :: Scientific/Engineering :: Image Recognition',
                 'Topic :: Scientific/Engineering :: Information Analysis',
                 'Topic :: Scientific/Engineering :: Mathematics',
                 'Topic :: Software Development :: Libraries :: Python Modules',
                 ],
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    python_requires='>=3.8',
    license=LICENSE,
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=REQUIREMENTS,
    extras_require={'test': ['pytest']},
    zip_safe=True,
)

setup(**setup_info)
