#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'docopt', 'tqdm', 'tabulate']
test_requires = ['tox', 'pytest']

setup(
    name='foldfuse',
    version='0.1.0',
    author='Andrew Thomson',
    author_email='athomsonguy@gmail.com',
    packages=['foldfuse'],
    install_requires = requires,
    tests_require = test_requires,
    extras_require = {
      'test': test_requires,
    },
    entry_points = {
      'console_scripts': [
        'foldfuse = foldfuse.ui:ui_main',
        ],
    },
    license='MIT',
    description='transducers which fuse map, filter and take into a single fold, with early termination.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)
