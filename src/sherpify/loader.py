from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import TextIO, Union, cast
from urllib.parse import urlparse

from .check import check_document
from .errors import SchemaError, SchemaVersionError
from .model import Document, build_document
from .sherpadoc import SHERPADOC_VERSION

logger = logging.getLogger(__name__)

SherpadocSource = Union[str, "PathLike[str]", TextIO, Mapping[str, object]]


def load_sherpadoc(source: SherpadocSource, check: bool = True) -> Document:
    """Load a sherpadoc document and build the schema model.

    Args:
        source: A file path, an http(s) URL, an open text stream, or an
            already decoded mapping
        check: Whether to run the validator on the loaded document

    Returns:
        The Document for the described API

    Raises:
        SchemaError: If the document cannot be read or has the wrong shape
        SchemaVersionError: If the sherpadoc version is not supported
        SchemaValidationError: If check is enabled and validation fails
    """
    data = _read_source(source)
    if not isinstance(data, dict):
        raise SchemaError("sherpadoc document must be an object")
    version = data.get("SherpadocVersion")
    if version != SHERPADOC_VERSION or isinstance(version, bool):
        raise SchemaVersionError(version, SHERPADOC_VERSION)
    document = build_document(cast(dict[str, object], data))
    logger.debug(
        "loaded sherpadoc for %r (api version %r, %d sections)",
        document.root.name,
        document.version,
        len(document.root.walk()),
    )
    if check:
        check_document(document)
    return document


def _is_url(source: str) -> bool:
    """Check if the source string is a URL."""
    parsed = urlparse(source)
    return parsed.scheme in {"http", "https"}


def _fetch_url(url: str) -> str:
    """Fetch a sherpadoc document from a URL.

    Sherpa servers publish their documentation at ``<baseURL>_docs``.

    Raises:
        SchemaError: If the URL cannot be fetched
    """
    from urllib.request import Request, urlopen

    logger.info("fetching sherpadoc from %s", url)
    try:
        request = Request(url, headers={"User-Agent": "sherpify"})
        with urlopen(request, timeout=30) as response:  # noqa: S310
            return response.read().decode("utf-8")
    except Exception as exc:
        raise SchemaError(f"Failed to fetch URL: {url}") from exc


def _read_source(source: SherpadocSource) -> object:
    """Read and decode a sherpadoc document from any supported source."""
    if isinstance(source, Mapping):
        return dict(source)
    if isinstance(source, (str, PathLike)):
        source_str = str(source)
        if _is_url(source_str):
            return _decode_text(_fetch_url(source_str), source_str, _get_url_extension(source_str))
        path = Path(source_str)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SchemaError(f"reading {path}: {exc}") from exc
        return _decode_text(text, str(path), path.suffix)
    return _load_json(source.read(), getattr(source, "name", "<stream>"))


def _get_url_extension(url: str) -> str:
    """Extract the file extension from a URL path."""
    return Path(urlparse(url).path).suffix.lower()


def _decode_text(text: str, origin: str, suffix: str) -> object:
    if suffix in {".yaml", ".yml"}:
        return _load_yaml(text, origin)
    return _load_json(text, origin)


def _load_json(text: str, origin: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"parsing sherpadoc json from {origin}: {exc}") from exc


def _load_yaml(text: str, origin: str) -> object:
    """Load YAML text, requiring PyYAML to be installed."""
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as exc:
        raise SchemaError("PyYAML is required to load YAML sherpadoc files") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"parsing sherpadoc yaml from {origin}: {exc}") from exc
