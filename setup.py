#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst', encoding='utf-8') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst', encoding='utf-8') as history_file:
    history = history_file.read()

requirements = ['Click>=7.0',
                'requests',
                'PyYAML',
                'rich',
                ]

test_requirements = ['pytest', ]


setup(
    author="jpweather developers",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Natural Language :: Japanese',
        'Programming Language :: Python :: 3',
        'Environment :: Console',
    ],
    description="Hourly weather forecast for home, printed as one table per day",
    entry_points={
        'console_scripts': [
            'jpweather=jpweather.cli:main',
        ],
    },
    install_requires=requirements,
    extras_require={'test': test_requirements},
    long_description=readme + '\n\n' + history,
    include_package_data=True,
    keywords='jpweather',
    name='jpweather',
    packages=find_packages(include=['jpweather']),
    python_requires='>=3.7',
    test_suite='tests',
    tests_require=test_requirements,
    version='0.1.0',
    zip_safe=False,
)
