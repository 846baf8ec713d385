# irirefs metadata

__all__ = [
    '__copyright__', '__license__', '__version__'
]

__copyright__ = 'Copyright (c) 2025 irirefs contributors'
__license__ = 'BSD 3-Clause license'
__version__ = '1.0.0'
