"""Testing support – ASGI fakes for exercising middlewares without a server."""

from beaver.testing.fakes import (
    RecordingSend,
    empty_receive,
    failing_app,
    make_http_scope,
    text_app,
)

__all__ = ["RecordingSend", "empty_receive", "failing_app", "make_http_scope", "text_app"]
