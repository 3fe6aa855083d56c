"""
Item collaborators - how build steps receive input and hand over output.

The host pipeline owns routing and persistence. A step only needs:
- a source yielding the raw bytes and declared extension of one item
- a sink accepting the transformed bytes under the same identifier
"""

from __future__ import annotations

from pathlib import PurePath
from typing import ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class ItemStoreError(Exception):
    """Base class for source/sink errors. `kind` mirrors ImageStepError.kind."""

    kind: ClassVar[str] = "item_store_error"


class InvalidIdentifierError(ItemStoreError):
    kind: ClassVar[str] = "invalid_identifier"

    def __init__(self, identifier: str, reason: str):
        self.identifier: str = identifier
        super().__init__(f"Invalid identifier ({reason}): {identifier}")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class SourceItem(BaseModel):
    """One input item as provided by the host pipeline."""

    identifier: str = Field(..., description="Item identity, usually a relative path")
    extension: str = Field(
        ...,
        description="Declared file extension including the dot (e.g. '.png')",
    )
    body: bytes = Field(..., description="Raw encoded bytes")

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def from_identifier(cls, identifier: str, body: bytes) -> "SourceItem":
        """Build an item whose extension is taken verbatim from its identifier."""
        return cls(identifier=identifier, extension=PurePath(identifier).suffix, body=body)


class OutputItem(BaseModel):
    """Transformed bytes tagged with the identity of the item they came from."""

    identifier: str
    body: bytes

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", frozen=True)


class SavedItem(BaseModel):
    """Metadata of an output written by a sink."""

    relative_path: str = Field(
        ...,
        description="Relative path of the written item within the output root",
    )
    size: int = Field(..., ge=0, description="Size in bytes")
    hash: str | None = Field(None, description="Optional content hash (SHA256)")

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class ItemSource(Protocol):
    def read(self, identifier: str) -> SourceItem:
        """
        Return the item named `identifier`.

        Raises:
            FileNotFoundError: If no such item exists
        """
        ...


@runtime_checkable
class ItemSink(Protocol):
    def write(self, item: OutputItem) -> SavedItem: ...
