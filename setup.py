#!/usr/bin/env python
""" Setup to allow pip installs of catalog-facets module """

from setuptools import setup

setup(
    name='catalog-facets',
    version='1.0.0',
    description='Faceted search aggregations and facet extraction for catalog search',
    license='AGPL',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Framework :: Django',
    ],
    packages=['catalog_facets', 'catalog_facets.tests'],
    python_requires='>=3.8',
    install_requires=[
        "django>=3.2",
        "event-tracking",
    ],
    extras_require={
        "test": [
            "pytest",
            "ddt",
        ],
    },
)
