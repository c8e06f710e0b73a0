#!/usr/bin/env python

import hovor
from pathlib import Path

from setuptools import setup, find_packages

long_description = Path('README.md').read_text(encoding='utf-8', errors='ignore')

classifiers = [  # copied from https://pypi.org/classifiers/
    'Development Status :: 4 - Beta',
    'Intended Audience :: Science/Research',
    'Topic :: Text Processing',
    'Topic :: Text Processing :: Linguistic',
    'Natural Language :: Czech',
    'License :: OSI Approved :: Apache Software License',
    'Programming Language :: Python :: 3 :: Only',
]

setup(
    name='hovor',
    version=hovor.__version__,
    description=hovor.__description__,
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=classifiers,
    python_requires='>=3.8',
    platforms=['any'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'hovor': ['data/*']},
    keywords=['colloquial speech', 'Czech', 'MorphoDiTa', 'NLP', 'natural language processing',
              'computational linguistics', 'data augmentation'],
    entry_points={
        'console_scripts': [
            'hovor=hovor.colloquialize:main',
        ],
    },
    install_requires=[
        'regex',
        'ufal.morphodita',
    ],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,
    zip_safe=False,
)
