# llmstxt/core/discovery/__init__.py
"""
Documentation tree discovery for llmstxt.

This package enumerates a docs directory in sidebar order, reading
category sidecars and document front matter to resolve ordering keys.
"""
from .walker import list_ordered, walk

__all__ = ["list_ordered", "walk"]
