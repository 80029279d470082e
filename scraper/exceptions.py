from __future__ import annotations


class FetchError(Exception):
	"""Raised when a source page cannot be downloaded (timeout, DNS, non-2xx, transport)."""

	def __init__(self, url: str, reason: str) -> None:
		super().__init__(f"Failed to fetch {url}: {reason}")
		self.url = url
		self.reason = reason


class ScrapeError(Exception):
	"""Raised when the scraping step breaks before producing a result."""
