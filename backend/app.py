from __future__ import annotations
import logging
from typing import Optional
from flask import Flask, jsonify, request
from flask_cors import CORS
from .config import Settings, load_settings
from .service import ScraperService
from .text_utils import to_iso

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
REFRESH_LIMIT = 5


def _last_update(service: ScraperService) -> Optional[str]:
	ts = service.get_last_update_time()
	return to_iso(ts) if ts else None


def _error(message: str, status: int = 500):
	return jsonify({"success": False, "error": message}), status


def create_app(service: Optional[ScraperService] = None) -> Flask:
	app = Flask(__name__)
	CORS(app)
	if service is None:
		service = ScraperService(load_settings())
	app.extensions["scraper_service"] = service

	@app.route("/health", methods=["GET"])  # simple health check
	def health():
		return jsonify({
			"status": "ok",
			"message": "API is running",
			"lastUpdate": _last_update(service),
		})

	@app.route("/api/bbb/news", methods=["GET"])  # latest news, ?limit=N
	def list_news():
		limit = request.args.get("limit", default=DEFAULT_LIMIT, type=int)
		if not limit or limit <= 0:
			limit = DEFAULT_LIMIT
		try:
			news = service.get_latest_news(limit)
		except Exception as e:
			logger.exception("error fetching news")
			return _error(str(e))
		return jsonify({
			"success": True,
			"count": len(news),
			"lastUpdate": _last_update(service),
			"news": [n.to_dict() for n in news],
		})

	@app.route("/api/bbb/latest", methods=["GET"])  # single most recent item
	def latest_news():
		try:
			news = service.get_latest_news(1)
		except Exception as e:
			logger.exception("error fetching latest news")
			return _error(str(e))
		if not news:
			return _error("No news found", 404)
		return jsonify({
			"success": True,
			"lastUpdate": _last_update(service),
			"news": news[0].to_dict(),
		})

	@app.route("/api/bbb/refresh", methods=["POST"])  # force a scrape now
	def refresh():
		try:
			service.scrape_now()
			news = service.get_latest_news(REFRESH_LIMIT)
		except Exception as e:
			logger.exception("error refreshing news")
			return _error(str(e))
		return jsonify({
			"success": True,
			"message": "Scraping completed",
			"count": len(news),
			"lastUpdate": _last_update(service),
			"news": [n.to_dict() for n in news],
		})

	@app.route("/api/bbb/stats", methods=["GET"])
	def stats():
		try:
			snapshot = service.get_stats()
		except Exception as e:
			logger.exception("error building stats")
			return _error(str(e))
		return jsonify({"success": True, "stats": snapshot.to_dict()})

	return app


def configure_logging(settings: Settings) -> None:
	logging.basicConfig(
		level=getattr(logging, settings.log_level, logging.INFO),
		format="[%(name)s] %(asctime)s %(levelname)s: %(message)s",
	)


def main() -> None:
	settings = load_settings()
	configure_logging(settings)
	service = ScraperService(settings)
	app = create_app(service)
	logger.info("server on port %d, scraping %s", settings.port, settings.base_url)
	service.initialize()
	try:
		app.run(host="0.0.0.0", port=settings.port, use_reloader=False)
	finally:
		service.destroy()


if __name__ == "__main__":
	main()
