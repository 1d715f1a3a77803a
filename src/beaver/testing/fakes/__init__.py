"""Testing fakes – in-memory doubles for ASGI servers and applications."""
from beaver.testing.fakes.asgi import (
    RecordingSend,
    empty_receive,
    failing_app,
    make_http_scope,
    text_app,
)

__all__ = ["RecordingSend", "empty_receive", "failing_app", "make_http_scope", "text_app"]
