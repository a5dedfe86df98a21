"""Shared client defaults.

Centralizes the values the client falls back to when a caller does not
configure them explicitly, so config models and the client agree.
"""

from __future__ import annotations

# Maximum request time in seconds
DEFAULT_TIMEOUT = 30.0

# Only status code treated as success
EXPECTED_STATUS = 200

# Methods that may carry a multipart body when the multipart flag is set
MULTIPART_METHODS = ("POST", "PUT")
