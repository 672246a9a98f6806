"""Command handlers for the kitsumanga CLI.

- lookup.py: Search a title and print its report
"""

from commands.lookup import lookup

__all__ = ["lookup"]
