"""
Exceptions shared by the sample store, the stitcher and the command-line
driver.
"""

from .exceptions import IngestionError, DegenerateInputError, ConfigurationError


__all__ = [
    "IngestionError",
    "DegenerateInputError",
    "ConfigurationError"
]
