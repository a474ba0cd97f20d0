"""
Oracle of Seasons ROM patcher.

Commits a decided item placement and a set of fixed edits to a ROM image,
and verifies ROM images against the patch tables.
"""

__version__ = "0.1.0"
