#!/usr/bin/env python
from setuptools import setup
import os


def get_version():
    curdir = os.path.dirname(__file__)
    filename = os.path.join(curdir, 'src', 'psfontmap', 'version.py')
    with open(filename, 'rb') as fp:
        return fp.read().decode('utf8').split('=')[1].strip(" \n'")


def readme():
    with open('README.rst') as f:
        return f.read()


setup(
    name='psfontmap',
    version=get_version(),
    description='PostScript font names and font maps for Tk canvas output',
    long_description=readme(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Printing',
        'Topic :: Text Processing :: Fonts',
    ],
    keywords='postscript font fontmap tk canvas',
    author='psfontmap contributors',
    license='MIT License',
    python_requires='>=3.10',
    package_dir={'': 'src'},
    packages=[
        'psfontmap',
        'psfontmap.core',
        'psfontmap.data',
    ],
    package_data={
        'psfontmap.data': ['*.json'],
    },
    install_requires=[
        'fontconfig-py; sys_platform != "win32"',
    ],
    extras_require={
        'test': [
            'pytest'],
    },
    entry_points={
        'console_scripts': ['psfontmap=psfontmap.__main__:main']
    },
    )
