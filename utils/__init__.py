"""Utilities and helper functions.

- exceptions: Error hierarchy for lookups
- logging: loguru setup
- text: Markup cleaning for synopsis text
"""

from utils.text import clean_html

__all__ = ["clean_html"]
