"""Area paging commands -- ``map`` and ``mapb``.

Both commands fetch a page of the location-area listing, move the session's
cursors to the page's ``next``/``previous`` links, and print one area name
per line.
"""

from __future__ import annotations

from pokedex.commands.base import Session, load
from pokedex.models import LocationAreaPage
from pokedex.output import print_data


def _show_page(session: Session, url: str) -> None:
    page = load(session, url, LocationAreaPage)

    session.next_url = page.next
    session.previous_url = page.previous

    for area in page.results:
        print_data(area.name)


def command_map(session: Session, args: list[str]) -> None:
    """Show the next page of location areas (the first page on the first call)."""
    url = session.next_url or session.client.location_areas_url()
    _show_page(session, url)


def command_map_back(session: Session, args: list[str]) -> None:
    """Show the previous page of location areas."""
    if session.previous_url is None:
        print_data("you're on the first page")
        return
    _show_page(session, session.previous_url)
