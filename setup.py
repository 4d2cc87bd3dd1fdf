#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'docopt']
test_requires = ['pytest', 'tabulate']

setup(
    name='xducer',
    version='0.1.0',
    author='Andrew Thomson',
    author_email='athomsonguy@gmail.com',
    packages=['xducer'],
    install_requires = requires,
    tests_require = test_requires,
    extras_require = {
        'test': test_requires,
    },
    entry_points = {
      'console_scripts': [
        'xducer = xducer.ui:main',
        ],
    },
    license='MIT',
    description='composable reducing transformations (transducers) with mapping and filtering.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)
