# coding: utf-8
from setuptools import find_packages, setup


with open('README.md', encoding='utf8') as file:
    long_description = file.read()

setup(
    name='arrayxml',
    version='1.0.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.8',
    license='MIT',
    description='Convert nested dicts to XML documents and back',
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=[
        'lxml',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
