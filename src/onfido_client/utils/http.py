# src/onfido_client/utils/http.py
"""Response inspection helpers shared by the client and the pager."""

from __future__ import annotations

import httpx

NEXT_REL = "next"


def is_json_response(response: httpx.Response) -> bool:
    """Return True when the response declares a JSON content type."""
    return "application/json" in response.headers.get("Content-Type", "")


def next_page_url(response: httpx.Response) -> str | None:
    """Return the URL of the ``rel="next"`` entry of the ``Link`` header.

    A missing or unparseable header yields None, which callers treat as the
    last page.
    """
    try:
        links = response.links
    except ValueError:
        return None

    for link in links.values():
        rels = link.get("rel", "").split()
        if NEXT_REL in rels and link.get("url"):
            return link["url"]
    return None
