"""Transport error classification.

Maps low-level error codes (``ECONNRESET``, ``HPE_INVALID_*``, ...) onto the
HTTP status the proxy answers with.
"""

from __future__ import annotations

import errno
import re
import socket

# Parser errors for malformed upstream messages
MALFORMED_PATTERN = re.compile(r"HPE_INVALID")

# Upstream unreachable or too slow
GATEWAY_TIMEOUT_CODES = frozenset({
    "ECONNRESET",
    "ENOTFOUND",
    "ECONNREFUSED",
    "ETIMEDOUT",
})

BAD_GATEWAY = 502
GATEWAY_TIMEOUT = 504
INTERNAL_SERVER_ERROR = 500


def classify(code: str | None) -> int:
    """Return the HTTP status for a transport error code.

    Total over its input: anything unrecognised, including ``None``, is 500.
    """
    if code and MALFORMED_PATTERN.search(code):
        return BAD_GATEWAY
    if code in GATEWAY_TIMEOUT_CODES:
        return GATEWAY_TIMEOUT
    return INTERNAL_SERVER_ERROR


def error_code(err: BaseException) -> str | None:
    """Extract an engine-style error code from an exception.

    An explicit string ``code`` attribute wins. Otherwise socket errors are
    translated to their symbolic names.
    """
    code = getattr(err, "code", None)
    if isinstance(code, str):
        return code

    # gaierror and timeout both subclass OSError, so check them first
    if isinstance(err, socket.gaierror):
        return "ENOTFOUND"
    if isinstance(err, TimeoutError):
        return "ETIMEDOUT"
    if isinstance(err, OSError) and err.errno is not None:
        return errno.errorcode.get(err.errno)
    return None
