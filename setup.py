#!/usr/bin/env python
#
# This will install the tessera package for library usage.

from setuptools import setup, find_packages

setup(name='tessera',
      version='0.3',
      description='Aperiodic and periodic planar tiling generators'
                  ' with raster and SVG renderers.',
      author='Claude Zervas',
      author_email='claude@utlco.com',
      packages=find_packages(exclude=['test', 'test.*']),
      install_requires=['lxml', 'Pillow>=9.1'],
      extras_require={'test': ['pytest']},
      test_suite='test',
      )
