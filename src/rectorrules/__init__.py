"""Queryable catalog of Rector refactoring rules."""

__version__ = "0.1.0"
