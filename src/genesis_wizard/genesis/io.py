"""
Genesis import and export.

Import accepts a local path or an http(s) URL and is all-or-nothing: it
either returns a complete, validated record or raises without side effects.

Export writes indented JSON. Write failures never touch in-memory state.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import to_json

from genesis_wizard import config
from genesis_wizard.types import FormatError, PersistenceError, TransportError

from .genesis import Genesis

logger = logging.getLogger(__name__)

REMOTE_SCHEMES = ("http", "https")
"""URL schemes fetched over the network. An empty scheme means a local path."""


def fetch_genesis_document(
    location: str,
    *,
    client: httpx.Client | None = None,
    timeout: float | None = None,
) -> bytes:
    """
    Resolve a genesis location to the raw document bytes.

    Args:
        location: Local file path, or an http/https URL.
        client: HTTP client to use for remote locations. A short-lived one is
            created when omitted.
        timeout: Request timeout in seconds for the default client.

    Raises:
        TransportError: If the scheme is unsupported, the file cannot be read,
            or the request fails or returns a non-success status.
    """
    scheme = urlsplit(location).scheme

    if scheme in REMOTE_SCHEMES:
        logger.info("Fetching genesis from %s", location)
        try:
            if client is not None:
                response = client.get(location)
            else:
                with httpx.Client(
                    timeout=config.FETCH_TIMEOUT if timeout is None else timeout,
                    follow_redirects=True,
                ) as default_client:
                    response = default_client.get(location)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                location, f"HTTP error {exc.response.status_code}: {exc.response.text[:200]}"
            ) from exc
        except httpx.RequestError as exc:
            raise TransportError(location, f"network error: {exc}") from exc
        return response.content

    if scheme == "":
        try:
            return Path(location).expanduser().read_bytes()
        except OSError as exc:
            raise TransportError(location, str(exc)) from exc

    raise TransportError(location, f"unsupported genesis URL scheme {scheme!r}")


def import_genesis(
    location: str,
    *,
    client: httpx.Client | None = None,
    timeout: float | None = None,
) -> Genesis:
    """
    Load a genesis record from a local file or an http(s) URL.

    Raises:
        TransportError: If the document cannot be retrieved.
        FormatError: If the document is not valid JSON or not a complete
            genesis record.
    """
    document = fetch_genesis_document(location, client=client, timeout=timeout)
    try:
        genesis = Genesis.from_json(document)
    except ValidationError as exc:
        raise FormatError(str(exc), location=location) from exc

    logger.info("Imported genesis block from %s", location)
    return genesis


def default_export_name(network: str, client: str | None = None) -> str:
    """
    File name a genesis is saved under by default.

    `<network>.json` for the canonical record and `<network>-<client>.json`
    for a client-specific variant.
    """
    if client is None:
        return f"{network}.json"
    return f"{network}-{client}.json"


def _encode(spec: Any) -> bytes:
    """Serialize a record or any JSON-able value to indented JSON."""
    if isinstance(spec, Genesis):
        return spec.to_json().encode("utf-8")
    if isinstance(spec, BaseModel):
        return spec.model_dump_json(by_alias=True, exclude_none=True, indent=2).encode("utf-8")
    return to_json(spec, indent=2, by_alias=True)


def _write(path: Path, spec: Any) -> None:
    try:
        out = _encode(spec)
    except (TypeError, ValueError) as exc:
        raise PersistenceError(str(path), f"cannot serialize {type(spec).__name__}: {exc}") from exc
    try:
        path.write_bytes(out)
    except OSError as exc:
        raise PersistenceError(str(path), str(exc)) from exc


def export_genesis(genesis: Genesis, path: Path | str) -> Path:
    """
    Write a genesis record to `path` as indented JSON.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    path = Path(path)
    _write(path, genesis)
    logger.info("Exported existing genesis block to %s", path)
    return path


def save_genesis(folder: Path | str, network: str, client: str, spec: Any) -> Path:
    """
    Write a client-specific genesis spec to `<folder>/<network>-<client>.json`.

    `spec` may be a genesis record, any other pydantic model, or plain
    JSON-able data in whatever shape the target client expects.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    path = Path(folder) / default_export_name(network, client)
    try:
        _write(path, spec)
    except PersistenceError as exc:
        logger.error("Failed to save genesis file for %s: %s", client, exc.detail)
        raise
    logger.info("Saved genesis chain spec for %s at %s", client, path)
    return path
