"""Loads the static claim manifest from a URL or a local file.

This is the only asynchronous step in the navigator. Every failure mode
(network, HTTP status, JSON, schema) surfaces as ``ManifestLoadError`` so
the caller can swap in a visible error state. No retries: a broken
manifest is reported, and the user refreshes.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ledger.errors import ManifestLoadError
from ledger.schemas.claim import Manifest

logger = logging.getLogger(__name__)


class ManifestClient:
    """Thin wrapper around httpx (or the filesystem) for the manifest."""

    def __init__(
        self,
        url: Optional[str] = None,
        path: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not url and not path:
            raise ValueError("ManifestClient needs a url or a path")
        self.url = url
        self.path = Path(path) if path else None
        self._timeout = timeout
        self._transport = transport

    @property
    def source(self) -> str:
        return self.url or str(self.path)

    async def fetch(self) -> Manifest:
        """Fetch and validate the manifest.

        Raises:
            ManifestLoadError: on any network, parse, or validation failure.
        """
        raw = await self._fetch_url() if self.url else self._read_file()
        try:
            manifest = Manifest.model_validate(raw)
        except ValidationError as exc:
            raise ManifestLoadError(self.source, f"invalid manifest: {exc}") from exc
        logger.info("Loaded %d claims from %s", len(manifest.claims), self.source)
        return manifest

    async def _fetch_url(self) -> Any:
        logger.debug("GET %s", self.url)
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                resp = await client.get(self.url)
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise ManifestLoadError(
                    self.source, f"HTTP {exc.response.status_code}"
                ) from exc
            except httpx.HTTPError as exc:
                raise ManifestLoadError(self.source, str(exc) or type(exc).__name__) from exc
        try:
            return resp.json()
        except ValueError as exc:
            raise ManifestLoadError(self.source, "response is not valid JSON") from exc

    def _read_file(self) -> Any:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ManifestLoadError(self.source, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise ManifestLoadError(self.source, f"not valid UTF-8: {exc}") from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestLoadError(self.source, f"invalid JSON: {exc}") from exc
