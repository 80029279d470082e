"""Shared fixtures: small HTML documents shaped like the Globo portals."""

from __future__ import annotations

from typing import Callable, Dict, List

import pytest

from backend.models import NewsItem
from scraper.exceptions import FetchError

FEED_PAGE = """
<html><body>
  <div class="feed-post-body">
    <h2><a href="/noticia/123">Paredão formado no BBB</a></h2>
    <p>Três participantes disputam a permanência</p>
    <img src="https://s2.glbimg.com/a.jpg">
    <time datetime="2025-01-20T20:00:00Z">20/01/2025</time>
  </div>
  <div class="feed-post-body">
    <a href="https://gshow.globo.com/realities/bbb/noticia/456" title="Líder da semana">
      <span class="feed-post-body-title">Líder da semana escolhe VIP</span>
    </a>
    <img data-src="https://s2.glbimg.com/b.jpg">
  </div>
  <div class="feed-post-body">
    <h2>Sem link nenhum</h2>
  </div>
  <article>
    <h3><a href="/noticia/999">Nunca deveria aparecer</a></h3>
  </article>
</body></html>
"""

ARTICLE_PAGE = """
<html><body>
  <article>
    <h3><a href="/noticia/789">Prova de resistência termina</a></h3>
    <p class="post__excerpt">Resumo da prova</p>
    <time datetime="2025-01-21T10:00:00Z"></time>
  </article>
  <article>
    <h3><a href="/noticia/123">Paredão formado no BBB</a></h3>
  </article>
</body></html>
"""

EMPTY_PAGE = "<html><body><div class='nothing-here'>vazio</div></body></html>"


@pytest.fixture()
def pages() -> Dict[str, str]:
	return {
		"https://gshow.globo.com/realities/bbb/": FEED_PAGE,
		"https://gshow.globo.com/realities/bbb/bbb-25/": ARTICLE_PAGE,
		"https://ge.globo.com/busca/?q=bbb": EMPTY_PAGE,
	}


def make_fetch(pages: Dict[str, str]) -> Callable[[str], str]:
	"""Fake fetcher: serves known URLs, raises FetchError for everything else."""
	def fetch(url: str) -> str:
		if url not in pages:
			raise FetchError(url, "connection refused")
		return pages[url]
	return fetch


def make_items(*titles: str, source: str = "https://gshow.globo.com/realities/bbb/") -> List[NewsItem]:
	return [
		NewsItem(
			title=t,
			link=f"https://gshow.globo.com/noticia/{i}",
			date=f"2025-01-20T{20 - i:02d}:00:00.000Z",
			source=source,
			scraped_at="2025-01-20T20:00:00.000Z",
		)
		for i, t in enumerate(titles)
	]
