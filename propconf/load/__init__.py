"""
Loading Module.

Loaders, their result envelope and the problems they report.
"""

from propconf.load.arguments import ColonArgumentLoader, MappingLoader, StringArgumentLoader
from propconf.load.base import Loader
from propconf.load.problems import (
    DuplicatePropertyProblem,
    LoaderProblem,
    ParsingProblem,
    Problem,
    UnknownPropertyProblem,
    ValueProblem,
)
from propconf.load.values import LoaderValues, PropertyValue

__all__ = [
    "ColonArgumentLoader",
    "DuplicatePropertyProblem",
    "Loader",
    "LoaderProblem",
    "LoaderValues",
    "MappingLoader",
    "ParsingProblem",
    "Problem",
    "PropertyValue",
    "StringArgumentLoader",
    "UnknownPropertyProblem",
    "ValueProblem",
]
