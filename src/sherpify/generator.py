from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .generation import GenerationProfile, generate_client
from .model import Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientSpec:
    api_name: str
    base_url: str


def generate_module(spec: ClientSpec, document: Document, profile: GenerationProfile) -> str:
    """Generate the complete client module source in memory."""
    return generate_client(document, spec.api_name, spec.base_url, profile).code


def write_module(
    spec: ClientSpec,
    document: Document,
    profile: GenerationProfile,
    path: Path,
) -> Path:
    """Generate a client module and write it to path.

    Generation finishes before the file is touched, and the file is then
    replaced by a rename, so a failure never leaves a partial module.
    """
    code = generate_module(spec, document, profile)
    _atomic_write(path, code)
    logger.info("wrote client %s to %s", spec.api_name, path)
    return path


def _atomic_write(path: Path, data: str) -> None:
    """Write data to a temp file in the target directory, then rename it."""
    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path: Optional[str] = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as handle:
            tmp_path = handle.name
            handle.write(data)
        os.replace(tmp_path, path)
    except BaseException:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
