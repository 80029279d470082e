from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from backend.models import NewsItem
from backend.text_utils import absolutize_url, clean_text, utc_now_iso

logger = logging.getLogger(__name__)

Strategy = Callable[[Tag], str]

# Tried in order; the first selector that yields at least one valid item wins.
CONTAINER_SELECTORS: Sequence[str] = (
	".feed-post-body",
	".bastian-feed-item",
	".widget--info",
	"article",
	".block-item",
	".feed-media-wrapper",
	".post",
	".materia",
)


def text_of(selector: str) -> Strategy:
	def strategy(node: Tag) -> str:
		found = node.select_one(selector)
		if found is None:
			return ""
		return clean_text(found.get_text(" "))
	return strategy


def attr_of(selector: str, attr: str) -> Strategy:
	def strategy(node: Tag) -> str:
		found = node.select_one(selector)
		if found is None:
			return ""
		value = found.get(attr)
		if isinstance(value, list):
			value = " ".join(value)
		return (value or "").strip()
	return strategy


FIELD_CHAINS: Dict[str, List[Strategy]] = {
	"title": [
		text_of("h2"),
		text_of("h3"),
		text_of(".feed-post-body-title"),
		text_of(".post__title"),
		text_of("a"),
		attr_of("a", "title"),
	],
	"link": [attr_of("a", "href")],
	"description": [
		text_of("p"),
		text_of(".feed-post-body-resumo"),
		text_of(".post__excerpt"),
	],
	"image": [attr_of("img", "src"), attr_of("img", "data-src")],
	"date": [
		text_of("time"),
		text_of(".feed-post-datetime"),
		text_of(".post__date"),
		attr_of("time", "datetime"),
	],
}


def first_non_empty(node: Tag, chain: Sequence[Strategy]) -> str:
	for strategy in chain:
		value = strategy(node)
		if value:
			return value
	return ""


def extract_fields(node: Tag) -> Dict[str, str]:
	"""Run every field chain against one container; missing fields come back empty."""
	return {name: first_non_empty(node, chain) for name, chain in FIELD_CHAINS.items()}


def build_item(node: Tag, origin: str, source: str = "") -> Optional[NewsItem]:
	fields = extract_fields(node)
	if not fields["title"] or not fields["link"]:
		return None
	now = utc_now_iso()
	return NewsItem(
		title=fields["title"],
		link=absolutize_url(fields["link"], origin),
		description=fields["description"],
		image=fields["image"],
		date=fields["date"] or now,
		source=source,
		scraped_at=now,
	)


def extract_items(
	html: Union[str, bytes],
	origin: str,
	source: str = "",
	selectors: Sequence[str] = CONTAINER_SELECTORS,
) -> List[NewsItem]:
	soup = BeautifulSoup(html, "html.parser")
	for selector in selectors:
		items: List[NewsItem] = []
		for node in soup.select(selector):
			item = build_item(node, origin, source)
			if item is not None:
				items.append(item)
		if items:
			logger.debug("selector %r matched %d items", selector, len(items))
			return items
	return []
