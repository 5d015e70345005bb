"""Serverless entry point: Vercel picks up the ASGI ``app`` exported here."""

import logging

from title_roulette.main import app

logging.basicConfig(level=logging.INFO)
# httpx logs each request URL at INFO, and TMDb takes api_key as a query param
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger(__name__).info("title roulette app loaded (%d routes)", len(app.routes))

__all__ = ["app"]
