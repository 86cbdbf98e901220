from setuptools import setup, find_packages

__version__ = '0.1.0'

requirements = [
    'coloredlogs>=15.0',
]

test_requirements = [
    'pytest',
]

setup(
    name='artledger',
    version=__version__,
    description='Token ownership ledger with on-demand generative artwork and metadata.',
    packages=find_packages(include=['artledger', 'artledger.*']),
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.8',
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
    zip_safe=True,
)
