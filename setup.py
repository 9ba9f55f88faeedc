#!/usr/bin/env python


import codecs
from os import path
import re
from setuptools import setup, find_namespace_packages


# Single-sourcing the package version: Read from __init__
def read(*parts):
    here = path.abspath(path.dirname(__file__))
    with codecs.open(path.join(here, *parts), 'r') as fp:
        return fp.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(
        r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M
    )
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


def parse_requirements(*parts):
    return [line.strip() for line in read(*parts).splitlines()
            if line.strip() and not line.strip().startswith('#')]


readme = read('README.rst')
history = read('HISTORY.rst')
requirements = parse_requirements('requirements', 'prod.txt')
test_requirements = parse_requirements('requirements', 'test.txt')

setup(
    author="dartqc developers",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
    ],
    description="Import, filtering and recoding of DArT SNP and SilicoDArT data",
    install_requires=requirements,
    license="MIT license",
    long_description=readme + '\n\n' + history,
    long_description_content_type='text/x-rst',
    include_package_data=True,
    keywords='dartqc DArT SNP SilicoDArT population genetics',
    name='dartqc',
    entry_points={'console_scripts': [
        'dartqc = dartqc.cli.main:main',
    ], },
    packages=find_namespace_packages(include=['dartqc', 'dartqc.*']),
    python_requires='>=3.8',
    extras_require={
        'test': test_requirements
    },
    version=find_version("dartqc", "__init__.py"),  # update there
    zip_safe=False,
)
