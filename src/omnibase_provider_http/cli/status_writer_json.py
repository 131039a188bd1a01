# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""JSON state-file status writer used by the CLI."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class StatusWriterJsonFile:
    """Persists a resource's status as camelCase JSON.

    The file is rewritten after every status change, so an interrupted cycle
    leaves the last recorded failure behind for the next run.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    async def write_status(self, resource: BaseModel) -> None:
        status = getattr(resource, "status")
        if not isinstance(status, BaseModel):
            raise TypeError(f"{type(resource).__name__} has no status model")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(
            status.model_dump_json(by_alias=True, exclude_none=True, indent=2),
            encoding="utf-8",
        )
        tmp_path.replace(self._path)
        logger.debug("Wrote status", extra={"state_path": str(self._path)})


__all__: list[str] = ["StatusWriterJsonFile"]
