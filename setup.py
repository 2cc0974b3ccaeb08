import os

from setuptools import setup

import _version


__version__ = _version.__version__


with open(os.path.join(os.path.dirname(__file__), 'requirements.txt'), 'r') as f:
    requirements = [l.strip() for l in f.readlines() if l.strip()]


def description():
    try:
        with open('README.md') as f:
            return f.read()
    except IOError:
        return 'Propositional inference engine: truth tables, forward and backward chaining, DPLL and resolution.'


setup(
    name='iengine',
    packages=['iengine', 'iengine._version', 'iengine.logic', 'iengine.prover',
        'iengine.prover.inference', 'iengine.utils'],
    package_dir={
        'iengine': 'iengine',
        'iengine._version': '_version',
    },
    version=__version__,
    description='Propositional logic inference engine',
    long_description=description(),
    author=_version.APPAUTHOR,
    keywords=['propositional logic', 'inference', 'horn clauses', 'forward chaining', 'backward chaining', 'DPLL', 'truth table'],
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        'Development Status :: 4 - Beta',

        # Indicate who your project is intended for
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Scientific/Engineering :: Artificial Intelligence ',

        'License :: OSI Approved :: MIT License',

        'Programming Language :: Python :: 3',
    ],
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'iengine=iengine.iquery:main',
            'ienginetest=iengine.test:main',
        ],
    },
)
