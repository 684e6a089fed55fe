# setup.py
from setuptools import setup, find_packages

setup(
    name='vtree',
    version='0.1.0',
    description='Keeps a host tree in step with a declarative virtual tree, with stateful components.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',

    # Finds `vtree`, `vtree.hosts` and `vtree_cli`
    packages=find_packages(exclude=['tests', 'tests.*']),

    install_requires=[
        'PySide6',
        'typer',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest'],
    },

    # Creates an executable script named `vtree` that calls the `app`
    # object inside `vtree_cli.main`.
    entry_points={
        'console_scripts': [
            'vtree = vtree_cli.main:app',
        ],
    },

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: User Interfaces',
    ],
    python_requires='>=3.10',
)
