"""
_version
Version information for iengine.
"""

__all__ = [
    'VERSION_MAJOR',
    'VERSION_MINOR',
    'VERSION_PATCH',
    'VERSION_STRING',
    'APPNAME',
    'APPAUTHOR',
    '__version__',
]

APPNAME = 'iengine'
APPAUTHOR = 'iengine developers'

VERSION_MAJOR = 0
VERSION_MINOR = 3
VERSION_PATCH = 0

VERSION_STRING_FULL = '%s.%s.%s' % (VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH)
VERSION_STRING_SHORT = '%s.%s' % (VERSION_MAJOR, VERSION_MINOR)
VERSION_STRING = VERSION_STRING_FULL

__version__ = VERSION_STRING_FULL
