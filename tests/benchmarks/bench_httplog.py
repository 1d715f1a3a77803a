"""Benchmark: request logging overhead.

Measures one request through :class:`RequestLogMiddleware` against the
bare application, with and without the panic boundary, plus the cost of
:func:`format_duration` on its own.

Run with::

    pytest tests/benchmarks/bench_httplog.py --benchmark-only
"""

from __future__ import annotations

import io

from beaver.httplog import Logger, format_duration
from beaver.testing import RecordingSend, empty_receive, make_http_scope, text_app

_SCOPE = make_http_scope(
    "/api/orders",
    headers={"User-Agent": "bench/1.0", "Referer": "http://localhost/"},
)


def _request(app):
    async def _call():
        await app(dict(_SCOPE), empty_receive, RecordingSend())

    return _call


# ---------------------------------------------------------------------------
# a) baseline
# ---------------------------------------------------------------------------


def test_bare_app(benchmark, run_async):
    """The wrapped application without any middleware."""
    call = _request(text_app())
    benchmark(lambda: run_async(call()))


# ---------------------------------------------------------------------------
# b) middleware
# ---------------------------------------------------------------------------


def test_middleware_in_memory_sink(benchmark, run_async):
    """One logged request written to an in-memory text sink."""
    sink = io.StringIO()
    call = _request(Logger(sink).middleware(text_app()))

    benchmark(lambda: run_async(call()))
    assert sink.getvalue().count("\n") >= 1


def test_middleware_with_prefix_and_recover(benchmark, run_async):
    """Logged request with a prefix and the default panic handler installed."""
    sink = io.StringIO()
    logger = Logger(sink).set_prefix("bench").set_panic_handler()
    call = _request(logger.middleware(text_app()))

    benchmark(lambda: run_async(call()))
    assert sink.getvalue().startswith("bench ")


def test_middleware_binary_sink(benchmark, run_async):
    """Logged request written to a binary sink (encoded per line)."""
    sink = io.BytesIO()
    call = _request(Logger(sink).middleware(text_app()))

    benchmark(lambda: run_async(call()))
    assert sink.getvalue().endswith(b"\n")


# ---------------------------------------------------------------------------
# c) duration rendering
# ---------------------------------------------------------------------------


def test_format_duration_milliseconds(benchmark):
    result = benchmark(format_duration, 1_234_567)
    assert result == "1.234567ms"


def test_format_duration_nanoseconds(benchmark):
    result = benchmark(format_duration, 420)
    assert result == "420ns"
