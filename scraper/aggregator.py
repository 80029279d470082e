from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, Sequence, Set, Union

from backend.models import NewsItem
from backend.text_utils import parse_iso, to_iso

from .exceptions import FetchError, ScrapeError
from .extractor import extract_items
from .fetcher import fetch_html

logger = logging.getLogger(__name__)

DEFAULT_ORIGIN = "https://gshow.globo.com"
DEMO_SOURCE = "demo"

SOURCES: Sequence[str] = (
	"https://gshow.globo.com/realities/bbb/",
	"https://gshow.globo.com/realities/bbb/bbb-25/",
	"https://ge.globo.com/busca/?q=bbb",
	"https://g1.globo.com/busca/?q=bbb",
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def dedupe_by_title(items: Iterable[NewsItem]) -> List[NewsItem]:
	"""Keep the first item per title and preserve order."""
	seen: Set[str] = set()
	out: List[NewsItem] = []
	for it in items:
		if it.title in seen:
			continue
		seen.add(it.title)
		out.append(it)
	return out


def sort_by_capture(items: Iterable[NewsItem]) -> List[NewsItem]:
	return sorted(items, key=lambda it: parse_iso(it.scraped_at) or _EPOCH, reverse=True)


def demo_items() -> List[NewsItem]:
	now = datetime.now(timezone.utc)
	scraped_at = to_iso(now)
	link = "https://gshow.globo.com/realities/bbb/"
	return [
		NewsItem(
			title="BBB 25: Confira as últimas notícias do reality",
			link=link,
			description="Acompanhe tudo sobre o Big Brother Brasil 25",
			image="https://s2-gshow.glbimg.com/bbb.jpg",
			date=to_iso(now),
			source=DEMO_SOURCE,
			scraped_at=scraped_at,
		),
		NewsItem(
			title="Paredão BBB 25: Veja quem está na berlinda esta semana",
			link=link,
			description="Três brothers disputam a preferência do público",
			image="https://s2-gshow.glbimg.com/paredao.jpg",
			date=to_iso(now - timedelta(hours=1)),
			source=DEMO_SOURCE,
			scraped_at=scraped_at,
		),
		NewsItem(
			title="Prova do Líder BBB 25: Saiba quem venceu a disputa",
			link=link,
			description="Novo líder foi definido na noite desta quinta-feira",
			image="https://s2-gshow.glbimg.com/lider.jpg",
			date=to_iso(now - timedelta(hours=2)),
			source=DEMO_SOURCE,
			scraped_at=scraped_at,
		),
	]


def scrape_sources(
	sources: Sequence[str] = SOURCES,
	origin: str = DEFAULT_ORIGIN,
	fetch: Callable[[str], Union[str, bytes]] = fetch_html,
) -> List[NewsItem]:
	"""
	Fetch and extract every source in turn, then dedupe by title and sort newest first.

	A source that fails to download is skipped. Raises ScrapeError when no source
	could be downloaded at all.
	"""
	all_items: List[NewsItem] = []
	failed = 0
	for url in sources:
		try:
			html = fetch(url)
		except FetchError as e:
			logger.warning("error fetching %s: %s", url, e.reason)
			failed += 1
			continue
		items = extract_items(html, origin, source=url)
		if items:
			logger.info("%d items found at %s", len(items), url)
		all_items.extend(items)

	if sources and failed == len(sources):
		raise ScrapeError(f"all {failed} sources unreachable")

	return sort_by_capture(dedupe_by_title(all_items))


def aggregate(
	sources: Sequence[str] = SOURCES,
	origin: str = DEFAULT_ORIGIN,
	fetch: Callable[[str], Union[str, bytes]] = fetch_html,
) -> List[NewsItem]:
	try:
		return scrape_sources(sources, origin, fetch)
	except Exception:
		logger.exception("scraping failed, falling back to demo data")
		return demo_items()
