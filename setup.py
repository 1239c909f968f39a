import os
import sys

from setuptools import find_packages
from setuptools import setup

# If the Python version is too low, developers will get a strange error when
# propreflect/__init__.py imports submodules that rely on recently-introduced
# typing features.
_supported = True
if sys.version_info.major < 3:
    _supported = False
if sys.version_info.major == 3 and sys.version_info.minor < 8:
    _supported = False
if not _supported:
    raise RuntimeError('propreflect requires Python 3.8 or higher.')

_here = os.path.dirname(os.path.abspath(__file__))
_version = {}
with open(os.path.join(_here, 'src', 'propreflect', '_version.py')) as fh:
    exec(fh.read(), _version)

setup(
    name='propreflect',
    version=_version['__version__'],
    description='Discover bean-like getter/setter properties of Python classes.',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    install_requires=[
        'typing_extensions>=4.6',
    ],
    extras_require={
        'test': ['pytest>=6.1.2'],
    },
    entry_points={
        'console_scripts': ['propreflect=propreflect.__main__:main'],
    },
)
