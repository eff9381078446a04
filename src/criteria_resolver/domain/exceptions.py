"""
Domain Exceptions.

ResolverError is the single fatal error kind of the resolution pipeline.
It is raised while a registry turns a criterion into a predicate and
propagates unchanged to the caller of get_predicates().
"""

from __future__ import annotations


class ResolverError(Exception):
    """Raised when a criterion cannot be evaluated into a predicate."""
    pass
