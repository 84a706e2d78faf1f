"""Curriculum resolution engine.

This package resolves route segments against the content index, enumerates
every routable parameter set, and projects resolved nodes into display facts.
"""

from .enumerator import enumerate_params, enumerate_paths
from .index import ContentIndex
from .projector import project
from .resolver import NotFoundError, resolve
from .types import RouteFamily

__all__ = [
    "ContentIndex",
    "NotFoundError",
    "RouteFamily",
    "enumerate_params",
    "enumerate_paths",
    "project",
    "resolve",
]
