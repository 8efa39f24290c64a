"""``bhdsearch``: search BHD from the command line."""

from __future__ import annotations

import asyncio
import json
import logging

import click

from bhdapi.client import Client
from bhdapi.config import get_settings
from bhdapi.exceptions import BhdError
from bhdapi.models import Torrent

logger = logging.getLogger(__name__)


async def run(client: Client, query: tuple[str, ...], *, all_pages: bool = False) -> list[Torrent]:
    """Search and return the results sorted by id."""
    if all_pages:
        results = [torrent async for torrent in client.iterate(*query)]
    else:
        results = (await client.search(*query)).results
    return sorted(results, key=lambda t: t.id)


def format_result(torrent: Torrent, base_url: str) -> str:
    name = json.dumps(torrent.name, ensure_ascii=False)
    return f"{torrent.id:02d}: {torrent.info_hash[:7]} {name} {base_url.rstrip('/')}/torrents/a.{torrent.id}"


@click.command("bhdsearch", help="Search Beyond-HD torrents and print one line per result.")
@click.option("--apikey", default=None, help="API key (default: $BHD_API_KEY)")
@click.option("--rsskey", default=None, help="RSS key (default: $BHD_RSS_KEY)")
@click.option("--all", "all_pages", is_flag=True, help="Walk every result page instead of the first.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.argument("query", nargs=-1)
def main(apikey: str | None, rsskey: str | None, all_pages: bool, verbose: bool, query: tuple[str, ...]) -> None:
    """Entry point for ``bhdsearch`` / ``python -m bhdapi.cli``."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = get_settings()
    overrides: dict[str, str] = {}
    if apikey is not None:
        overrides["api_key"] = apikey
    if rsskey is not None:
        overrides["rss_key"] = rsskey

    async def _search() -> list[Torrent]:
        async with Client.from_settings(settings, **overrides) as client:
            return await run(client, query, all_pages=all_pages)

    try:
        results = asyncio.run(_search())
    except BhdError as exc:
        click.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from exc

    for torrent in results:
        click.echo(format_result(torrent, settings.base_url))


if __name__ == "__main__":
    main()
