from __future__ import annotations

import pytest

from backend.models import NewsItem
from conftest import make_fetch, make_items
from scraper import aggregator
from scraper.aggregator import (
	DEMO_SOURCE,
	SOURCES,
	aggregate,
	dedupe_by_title,
	demo_items,
	scrape_sources,
	sort_by_capture,
)
from scraper.exceptions import ScrapeError

ORIGIN = "https://gshow.globo.com"


def test_four_fixed_sources():
	assert len(SOURCES) == 4
	assert SOURCES[0] == "https://gshow.globo.com/realities/bbb/"


def test_aggregate_skips_failed_sources_and_tags_origin(pages):
	items = aggregate(SOURCES, ORIGIN, make_fetch(pages))
	titles = [i.title for i in items]
	assert "Prova de resistência termina" in titles
	assert "Paredão formado no BBB" in titles
	by_title = {i.title: i for i in items}
	assert by_title["Prova de resistência termina"].source == SOURCES[1]


def test_titles_unique_and_earlier_source_wins(pages):
	items = aggregate(SOURCES, ORIGIN, make_fetch(pages))
	titles = [i.title for i in items]
	assert len(titles) == len(set(titles))
	dup = [i for i in items if i.title == "Paredão formado no BBB"]
	assert len(dup) == 1
	assert dup[0].source == SOURCES[0]


def test_every_item_has_title_and_link(pages):
	for item in aggregate(SOURCES, ORIGIN, make_fetch(pages)):
		assert item.title
		assert item.link.startswith("https://")


def test_all_sources_failing_yields_demo_data():
	items = aggregate(SOURCES, ORIGIN, make_fetch({}))
	assert len(items) == 3
	assert {i.source for i in items} == {DEMO_SOURCE}


def test_scrape_sources_raises_when_nothing_reachable():
	with pytest.raises(ScrapeError):
		scrape_sources(SOURCES, ORIGIN, make_fetch({}))


def test_empty_pages_yield_empty_result_not_demo():
	pages = {url: "<html><body></body></html>" for url in SOURCES}
	assert aggregate(SOURCES, ORIGIN, make_fetch(pages)) == []


def test_extraction_failure_falls_back_to_demo(pages, monkeypatch):
	def boom(*args, **kwargs):
		raise RuntimeError("parser exploded")

	monkeypatch.setattr(aggregator, "extract_items", boom)
	items = aggregate(SOURCES, ORIGIN, make_fetch(pages))
	assert [i.source for i in items] == [DEMO_SOURCE] * 3


def test_dedupe_keeps_first_occurrence():
	first = make_items("A", "B", source="one")
	second = make_items("B", "C", source="two")
	out = dedupe_by_title(first + second)
	assert [i.title for i in out] == ["A", "B", "C"]
	assert out[1].source == "one"


def test_sort_by_capture_newest_first():
	old = NewsItem(title="old", link="l", scraped_at="2025-01-20T10:00:00.000Z")
	new = NewsItem(title="new", link="l", scraped_at="2025-01-20T11:00:00.000Z")
	assert [i.title for i in sort_by_capture([old, new])] == ["new", "old"]


def test_demo_items_spaced_an_hour_apart():
	items = demo_items()
	assert [i.title for i in items] == [
		"BBB 25: Confira as últimas notícias do reality",
		"Paredão BBB 25: Veja quem está na berlinda esta semana",
		"Prova do Líder BBB 25: Saiba quem venceu a disputa",
	]
	assert items[0].date > items[1].date > items[2].date
