#!/usr/bin/env python

from setuptools import setup

setup(
    name='pdflex',
    version='0.1',
    description='Streaming PDF tokenizer and object parser',
    long_description=open('README.rst').read(),
    author='pdflex contributors',
    platforms='Independent',
    packages=['pdflex', 'pdflex.objects'],
    install_requires=['pycryptodome'],
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
    ],
    keywords='pdf tokenizer lexer parser objects',
)
