# -*- coding: utf-8 -*-
"""
irirefs
=======

irirefs_ is a Python library for RFC 3987 IRI references: parsing,
resolution, relativization and normalization.

.. _irirefs: https://www.ietf.org/rfc/rfc3987.txt
"""

from setuptools import setup
import os

# get meta data
about = {}
with open(os.path.join(
        os.path.dirname(__file__), 'lib', 'irirefs', '__about__.py')) as fp:
    exec(fp.read(), about)

with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as fp:
    long_description = fp.read()

setup(
    name='irirefs',
    version=about['__version__'],
    description='Resolution, relativization and normalization of IRIs',
    long_description=long_description,
    packages=['irirefs'],
    package_dir={'': 'lib'},
    license=about['__license__'],
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet',
        'Topic :: Software Development :: Libraries',
    ],
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['irirefs=irirefs.cli:main'],
    },
)
