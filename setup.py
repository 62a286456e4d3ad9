# coding=utf-8
"""Setup package 'bigfraction'."""

from setuptools import setup

with open('README.md') as file:
    long_description = file.read()

setup(
    name="bigfraction",
    version="0.9.0",
    author="Michael Amrhein",
    author_email="michael@adrhinum.de",
    url="https://github.com/mamrhein/bigfraction",
    description="Exact fractions with fixed-point rendering",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={'': 'src'},
    packages=['bigfraction'],
    python_requires=">=3.7",
    tests_require=["pytest", "hypothesis"],
    extras_require={
        "test": ["pytest", "hypothesis"],
        },
    license='BSD',
    keywords='fraction rational number datatype',
    platforms='all',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules"
        ],
    zip_safe=False,
    )
