"""Helpers for reading loosely-typed request bodies."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rest_framework.request import Request


def request_payload(request: Request) -> Mapping[str, Any]:
    """Return the parsed JSON body, or an empty mapping when it is not an object."""
    data = request.data
    return data if isinstance(data, Mapping) else {}
