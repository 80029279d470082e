from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from dotenv import load_dotenv

from .text_utils import site_origin

DEFAULT_BASE_URL = "https://gshow.globo.com/realities/bbb/"
DEFAULT_INTERVAL_MS = 300000
DEFAULT_PORT = 3000


def _int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	try:
		value = int(raw) if raw else default
	except ValueError:
		return default
	return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
	base_url: str = DEFAULT_BASE_URL
	interval_ms: int = DEFAULT_INTERVAL_MS
	port: int = DEFAULT_PORT
	log_level: str = "INFO"

	@property
	def origin(self) -> str:
		return site_origin(self.base_url)

	@property
	def interval_seconds(self) -> Union[int, float]:
		seconds, rest = divmod(self.interval_ms, 1000)
		return seconds if not rest else self.interval_ms / 1000


def load_settings() -> Settings:
	load_dotenv()
	return Settings(
		base_url=os.getenv("BBB_URL") or DEFAULT_BASE_URL,
		interval_ms=_int_env("SCRAPE_INTERVAL", DEFAULT_INTERVAL_MS),
		port=_int_env("PORT", DEFAULT_PORT),
		log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
	)
