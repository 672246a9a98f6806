"""Manga lookup command handler.

This module handles:
- Searching Kitsu for a title
- Printing the report, the "no results" line or the error line
"""

from services.kitsu_service import KitsuClient
from ui.report import print_line, print_report
from utils.exceptions import KitsuMangaError
from utils.logging import get_logger

logger = get_logger(__name__)


def lookup(title: str, client: KitsuClient | None = None) -> bool:
    """Look up a manga title and print the result.

    Errors are reported on stdout with an ``Error:`` prefix and never raised.

    Args:
        title: Search title (non-empty)
        client: Kitsu client (a default one is built when omitted)

    Returns:
        True if the lookup finished without error (including "no results")
    """
    client = client or KitsuClient()

    try:
        manga = client.search_manga(title)
    except KitsuMangaError as e:
        logger.debug(f"Lookup failed for {title!r}: {e!r}")
        print_line(f"Error: {e}")
        return False

    if manga is None:
        print_line(f"No manga found for: {title}")
        return True

    print_report(manga)
    return True
