from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from functools import partial
from typing import Callable, List, Optional

from apscheduler.schedulers.background import BackgroundScheduler

from scraper.aggregator import SOURCES, aggregate
from scraper.schedule import start_scheduler

from .cache import TTLCache
from .config import Settings
from .models import NewsItem, ScrapeStats

logger = logging.getLogger(__name__)

CACHE_KEY = "news"


class ScraperService:
	"""
	Owns the scraped news state and keeps it fresh.

	`news_data` and `last_update` are only ever replaced together, in one step, by a
	scrape that produced at least one item. The cache is a faster read path that is
	allowed to be cold or expired at any time.
	"""

	def __init__(
		self,
		settings: Optional[Settings] = None,
		scrape: Optional[Callable[[], List[NewsItem]]] = None,
		cache: Optional[TTLCache] = None,
	) -> None:
		self.settings = settings or Settings()
		self._scrape = scrape or partial(aggregate, SOURCES, self.settings.origin)
		self.cache = cache or TTLCache()
		self.news_data: List[NewsItem] = []
		self.last_update: Optional[datetime] = None
		self._scheduler: Optional[BackgroundScheduler] = None
		self._state_lock = threading.Lock()

	@property
	def running(self) -> bool:
		return self._scheduler is not None

	def initialize(self) -> None:
		logger.info("starting scraper service")
		try:
			self.scrape_now()
		except Exception:
			logger.exception("initial scrape failed; relying on the schedule")
		if self._scheduler is None:
			self._scheduler = start_scheduler(self.scrape_now, self.settings.interval_seconds)

	def scrape_now(self) -> List[NewsItem]:
		logger.info("fetching BBB news")
		try:
			news = self._scrape()
		except Exception:
			logger.exception("scrape failed")
			raise

		if news:
			with self._state_lock:
				self.news_data = list(news)
				self.last_update = datetime.now(timezone.utc)
				self.cache.set(CACHE_KEY, list(news))
			logger.info("%d news items captured", len(news))
		else:
			logger.warning("no news found while scraping; keeping previous data")
		return news

	def get_latest_news(self, limit: int = 20) -> List[NewsItem]:
		limit = max(limit, 0)
		cached = self.cache.get(CACHE_KEY)
		if cached:
			return cached[:limit]
		if self.news_data:
			return self.news_data[:limit]
		self.scrape_now()
		return self.news_data[:limit]

	def get_last_update_time(self) -> Optional[datetime]:
		return self.last_update

	def get_stats(self) -> ScrapeStats:
		with self._state_lock:
			news = self.news_data
			last_update = self.last_update
		return ScrapeStats(
			total_news=len(news),
			last_update=last_update,
			scrape_interval=self.settings.interval_seconds,
			cache_enabled=True,
			sources=list(dict.fromkeys(n.source for n in news)),
			oldest_news=news[-1].date if news else None,
			newest_news=news[0].date if news else None,
		)

	def destroy(self) -> None:
		if self._scheduler is None:
			return
		self._scheduler.shutdown(wait=False)
		self._scheduler = None
		logger.info("automatic scraping stopped")
