"""
Figma REST Client — URL parsing and node fetching.

Only the read endpoints the CLI needs: GET /files/{key}/nodes.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote

import httpx

from propper.config import settings

logger = logging.getLogger("propper.figma")

_FILE_KEY = re.compile(r"figma\.com/(?:file|design)/([^/?]+)")
_NODE_ID = re.compile(r"node-id=([^&]+)")


class FigmaError(RuntimeError):
    """A Figma URL could not be parsed or the REST API call failed."""


@dataclass(frozen=True)
class FigmaLocation:
    file_key: str
    node_id: str | None


def parse_figma_url(url: str) -> FigmaLocation:
    """
    Extract the file key and optional node id from a Figma share link.

    Supports:
        https://www.figma.com/file/{fileKey}/{title}?node-id={nodeId}
        https://www.figma.com/design/{fileKey}/{title}?node-id={nodeId}

    Node ids in links use "-" where the API expects ":" (1-23 → 1:23).
    """
    match = _FILE_KEY.search(url)
    if not match:
        raise FigmaError(f"Invalid Figma URL: {url}")

    node_match = _NODE_ID.search(url)
    node_id = unquote(node_match.group(1)).replace("-", ":") if node_match else None
    return FigmaLocation(file_key=match.group(1), node_id=node_id)


class FigmaClient:
    """Thin httpx wrapper around the Figma REST API."""

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url or settings.figma_api_url,
            headers={"X-Figma-Token": token},
            timeout=timeout or settings.http_timeout,
            transport=transport,
        )

    def __enter__(self) -> FigmaClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_node(self, file_key: str, node_id: str) -> dict[str, Any]:
        """Fetch a single node document from a file."""
        logger.debug(f"Fetching node {node_id} from file {file_key}")
        try:
            response = self._client.get(f"/files/{file_key}/nodes", params={"ids": node_id})
        except httpx.HTTPError as e:
            raise FigmaError(f"Figma API request failed: {e}") from e

        if response.is_error:
            raise FigmaError(f"Figma API error {response.status_code}: {response.text}")

        try:
            nodes = response.json().get("nodes") or {}
        except ValueError as e:
            raise FigmaError(f"Figma API returned invalid JSON: {e}") from e
        node = (nodes.get(node_id) or {}).get("document")
        if not node:
            raise FigmaError(f"Node {node_id} not found in file {file_key}")
        return node
