from __future__ import annotations

import hashlib
from os import PathLike
from pathlib import Path
from typing import ClassVar

from loguru import logger
from typing_extensions import override

from .item import (
    InvalidIdentifierError,
    ItemSink,
    ItemSource,
    ItemStoreError,
    OutputItem,
    SavedItem,
    SourceItem,
)


class OutputDirectoryCreationError(ItemStoreError):
    kind: ClassVar[str] = "output_directory_error"

    def __init__(self, path: Path):
        self.path: Path = path
        super().__init__(f"Failed to create output directory '{path}'")


class LocalItemStore(ItemSource, ItemSink):
    """
    Local filesystem implementation of ItemSource and ItemSink.

    Layout:
        source_dir/<identifier>   (read)
        output_dir/<identifier>   (written)

    Identifiers are relative paths; the extension reported for an item
    is the verbatim suffix of its identifier.
    """

    def __init__(
        self,
        source_dir: str | PathLike[str],
        output_dir: str | PathLike[str],
    ):
        self._source_dir: Path = Path(source_dir).expanduser().resolve()
        self._output_dir: Path = Path(output_dir).expanduser().resolve()
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputDirectoryCreationError(self._output_dir) from exc

    @property
    def source_dir(self) -> Path:
        return self._source_dir

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _safe_path(base: Path, identifier: str) -> Path:
        """
        Resolve `identifier` under `base`.
        Prevents path traversal.
        """
        resolved = (base / identifier).resolve()

        if base not in resolved.parents:
            raise InvalidIdentifierError(identifier, "path traversal detected")

        return resolved

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    @override
    def read(self, identifier: str) -> SourceItem:
        path = self._safe_path(self._source_dir, identifier)
        if not path.is_file():
            raise FileNotFoundError(f"Input item not found: {identifier}")

        return SourceItem.from_identifier(identifier, path.read_bytes())

    def identifiers(self, pattern: str = "**/*") -> list[str]:
        """List source identifiers matching a glob pattern, sorted."""
        return sorted(
            path.relative_to(self._source_dir).as_posix()
            for path in self._source_dir.glob(pattern)
            if path.is_file()
        )

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    @override
    def write(self, item: OutputItem) -> SavedItem:
        dst = self._safe_path(self._output_dir, item.identifier)
        dst.parent.mkdir(parents=True, exist_ok=True)
        _ = dst.write_bytes(item.body)

        saved = SavedItem(
            relative_path=item.identifier,
            size=len(item.body),
            hash=hashlib.sha256(item.body).hexdigest(),
        )
        logger.debug(f"Wrote {saved.size} bytes to {dst}")
        return saved
