
from setuptools import setup, find_packages


setup(
    name='disjoint-set',
    version='1.0.0',
    description='A union-find data structure with union by rank and path compression.',
    packages=find_packages(include=['disjoint_set', 'disjoint_set.*']),
    python_requires='>=3.8',
    install_requires=[
        'networkx',
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
