"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- identifiers: Path id parsing

Usage:
======
    from kennel.shared.utils.identifiers import parse_record_id
"""

from kennel.shared.utils.identifiers import parse_number, parse_record_id

__all__ = [
    "parse_number",
    "parse_record_id",
]
