from __future__ import annotations

import logging
from typing import Callable

from apscheduler.schedulers.background import BackgroundScheduler

logger = logging.getLogger(__name__)

JOB_ID = "scrape-news"


def run_job(scrape: Callable[[], object]) -> None:
	logger.info("scheduled scrape: start")
	try:
		scrape()
		logger.info("scheduled scrape: done")
	except Exception:
		# keep the schedule alive; the next tick retries
		logger.exception("scheduled scrape: error")


def start_scheduler(scrape: Callable[[], object], interval_seconds: float) -> BackgroundScheduler:
	"""Run `scrape` every `interval_seconds` on a background thread; never two runs at once."""
	scheduler = BackgroundScheduler(daemon=True)
	scheduler.add_job(
		run_job,
		"interval",
		args=[scrape],
		seconds=interval_seconds,
		id=JOB_ID,
		coalesce=True,
		max_instances=1,
		misfire_grace_time=120,
	)
	scheduler.start()
	logger.info("automatic scraping every %ss", interval_seconds)
	return scheduler
