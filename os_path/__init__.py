from .component import Component, Parts
from .exceptions import InvalidEncoding, MalformedPrefix, PathError
from .path import OsPath, parse, to_text
from .platform import Platform

__version__ = "0.1.0"

__all__ = [
    "Component",
    "InvalidEncoding",
    "MalformedPrefix",
    "OsPath",
    "Parts",
    "PathError",
    "Platform",
    "parse",
    "to_text",
]
