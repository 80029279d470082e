from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from .exceptions import FetchError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10

# Set a realistic user-agent so the portals don't block requests
REQUEST_HEADERS: Dict[str, str] = {
	"User-Agent": (
		"Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
		"AppleWebKit/537.36 (KHTML, like Gecko) "
		"Chrome/120.0.0.0 Safari/537.36"
	),
	"Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
	"Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7",
}


def fetch_html(
	url: str,
	timeout: float = REQUEST_TIMEOUT,
	session: Optional[requests.Session] = None,
) -> bytes:
	"""
	GET a source page and return its raw markup bytes; the parser detects the encoding.

	Raises FetchError on timeout, connection/DNS failure, non-2xx status or any
	other transport error.
	"""
	getter = session.get if session is not None else requests.get
	try:
		r = getter(url, headers=dict(REQUEST_HEADERS), timeout=timeout)
		r.raise_for_status()
	except requests.Timeout as e:
		raise FetchError(url, f"timeout after {timeout}s") from e
	except requests.HTTPError as e:
		code = getattr(e.response, "status_code", None)
		raise FetchError(url, f"http_error:{code}") from e
	except requests.RequestException as e:
		raise FetchError(url, str(e) or e.__class__.__name__) from e
	logger.debug("fetched %s (%d bytes)", url, len(r.content or b""))
	return r.content
