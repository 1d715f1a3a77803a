"""Example: request logging for a FastAPI service.

Every request produces one line on standard output (or in the file named
by ``HTTPLOG_FILE``), and exceptions raised by route handlers are turned
into ``500 Internal Server Error`` responses when ``HTTPLOG_RECOVER`` is
set.

Run with::

    pip install "beaver[test]" uvicorn
    HTTPLOG_PREFIX=orders HTTPLOG_RECOVER=true uvicorn docs.examples.app:app

Then::

    curl http://localhost:8000/api/orders/42
    curl http://localhost:8000/boom

Sample output (the referer field is empty for curl)::

    orders 2026-10-19T12:00:00.123456+00:00 412.5µs 127.0.0.1 200 GET /api/orders/42  curl/8.5.0
    orders 2026-10-19T12:00:01.654321+00:00 1.208ms 127.0.0.1 500 GET /boom  curl/8.5.0
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from beaver.config import EnvSettingsLoader
from beaver.data import JSONPod
from beaver.httplog import HttpLogSettings, Logger
from beaver.observability.logging import LoggerFactory

LoggerFactory.configure(level=logging.INFO, json=False)

api = FastAPI()


@api.get("/api/orders/{order_id}")
async def get_order(order_id: int):
    return JSONPod({"id": order_id, "status": "shipped"}).serve()


@api.get("/boom")
async def boom():
    raise RuntimeError("something broke")


request_log = Logger.from_settings(EnvSettingsLoader().load(HttpLogSettings))
app = request_log.middleware(api)
