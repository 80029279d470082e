from __future__ import annotations

import re
import urllib.parse
from datetime import datetime, timezone
from typing import Optional

_WS = re.compile(r"\s+")


def clean_text(text: Optional[str]) -> str:
	if not text:
		return ""
	return _WS.sub(" ", text).strip()


def site_origin(url: str) -> str:
	"""'https://gshow.globo.com/realities/bbb/' -> 'https://gshow.globo.com'"""
	u = urllib.parse.urlsplit(url)
	return urllib.parse.urlunsplit((u.scheme or "https", u.netloc, "", "", ""))


def absolutize_url(link: str, origin: str) -> str:
	# anything already carrying an http(s) scheme passes through untouched
	if link.startswith("http"):
		return link
	return urllib.parse.urljoin(origin.rstrip("/") + "/", link)


def to_iso(dt: datetime) -> str:
	if dt.tzinfo is None:
		dt = dt.replace(tzinfo=timezone.utc)
	return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
	return to_iso(datetime.now(timezone.utc))


def parse_iso(value: Optional[str]) -> Optional[datetime]:
	if not value:
		return None
	try:
		dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
	except ValueError:
		return None
	if dt.tzinfo is None:
		dt = dt.replace(tzinfo=timezone.utc)
	return dt
