from __future__ import annotations

import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

DEFAULT_TTL = 300.0


class TTLCache:
	"""
	Small thread-safe key/value store whose entries expire after a time-to-live.

	Expired entries are dropped lazily on access. `clock` must be monotonic; it is
	injectable so expiry can be tested without sleeping.
	"""

	def __init__(
		self,
		default_ttl: float = DEFAULT_TTL,
		clock: Callable[[], float] = time.monotonic,
	) -> None:
		self._data: Dict[str, Tuple[Any, float]] = {}
		self._default_ttl = default_ttl
		self._clock = clock
		self._lock = threading.Lock()

	@property
	def default_ttl(self) -> float:
		return self._default_ttl

	def _expired(self, expiry: float) -> bool:
		return self._clock() >= expiry

	def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
		effective = ttl if ttl is not None else self._default_ttl
		with self._lock:
			self._data[key] = (value, self._clock() + effective)

	def get(self, key: str) -> Optional[Any]:
		with self._lock:
			entry = self._data.get(key)
			if entry is None:
				return None
			value, expiry = entry
			if self._expired(expiry):
				del self._data[key]
				return None
			return value

	def contains(self, key: str) -> bool:
		return self.get(key) is not None

	def delete(self, key: str) -> None:
		with self._lock:
			self._data.pop(key, None)

	def clear(self) -> None:
		with self._lock:
			self._data.clear()
