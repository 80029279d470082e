from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from .text_utils import to_iso


@dataclass(frozen=True)
class NewsItem:
	title: str
	link: str
	description: str = ""
	image: str = ""
	date: str = ""
	source: str = ""
	scraped_at: str = ""

	def to_dict(self) -> Dict[str, Any]:
		return {
			"title": self.title,
			"link": self.link,
			"description": self.description,
			"image": self.image,
			"date": self.date,
			"source": self.source,
			"scrapedAt": self.scraped_at,
		}


@dataclass
class ScrapeStats:
	total_news: int
	last_update: Optional[datetime]
	scrape_interval: Union[int, float]
	cache_enabled: bool = True
	sources: List[str] = field(default_factory=list)
	oldest_news: Optional[str] = None
	newest_news: Optional[str] = None

	def to_dict(self) -> Dict[str, Any]:
		return {
			"totalNews": self.total_news,
			"lastUpdate": to_iso(self.last_update) if self.last_update else None,
			"scrapeInterval": self.scrape_interval,
			"cacheEnabled": self.cache_enabled,
			"sources": list(self.sources),
			"oldestNews": self.oldest_news,
			"newestNews": self.newest_news,
		}
