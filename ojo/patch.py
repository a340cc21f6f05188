"""Patches: sets of changes with metadata, identified by the hash of their serialized form."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, BinaryIO

import yaml

from .change import Changes, DeleteNode, NewEdge
from .error import OjoError
from .ids import PatchId, _patch_id_from_data, _patch_id_to_data


@dataclass(frozen=True)
class PatchHeader:
    """Metadata of a patch; it is hashed along with the changes."""

    author: str
    description: str
    timestamp: datetime


def _header_to_data(header: PatchHeader) -> dict[str, Any]:
    return {
        "author": header.author,
        "description": header.description,
        "timestamp": header.timestamp.isoformat(),
    }


def _header_from_data(data: Any) -> PatchHeader:
    author, description, timestamp = data["author"], data["description"], data["timestamp"]
    if not isinstance(author, str) or not isinstance(description, str):
        raise TypeError("author and description must be strings")
    if isinstance(timestamp, str):
        timestamp = datetime.fromisoformat(timestamp)
    elif not isinstance(timestamp, datetime):
        raise TypeError("timestamp must be a date and time")
    return PatchHeader(author, description, timestamp)


@dataclass(frozen=True)
class UnidentifiedPatch:
    """A patch without an id yet.

    Changes refer to nodes of this patch through :meth:`PatchId.cur`. Writing
    the patch out computes its id from the written bytes.
    """

    changes: Changes
    header: PatchHeader
    deps: tuple[PatchId, ...]

    @classmethod
    def create(cls, author: str, description: str, changes: Changes) -> UnidentifiedPatch:
        """A new patch, timestamped now, depending on every other patch its changes mention."""
        deps: set[PatchId] = set()
        for change in changes.changes:
            if isinstance(change, DeleteNode):
                deps.add(change.id.patch)
            elif isinstance(change, NewEdge):
                deps.update((change.src.patch, change.dest.patch))
        deps = {d for d in deps if not d.is_cur()}
        header = PatchHeader(author, description, datetime.now(timezone.utc))
        return cls(changes, header, tuple(sorted(deps)))

    def _to_bytes(self) -> bytes:
        data = {
            "changes": self.changes.to_data(),
            "header": _header_to_data(self.header),
            "deps": [_patch_id_to_data(d) for d in self.deps],
        }
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).encode("utf-8")

    @classmethod
    def _from_data(cls, data: Any) -> UnidentifiedPatch:
        if not isinstance(data, dict):
            raise OjoError("patch data must be a mapping")
        try:
            changes = Changes.from_data(data["changes"])
            header = _header_from_data(data["header"])
            deps = data["deps"]
            if not isinstance(deps, list):
                raise TypeError("deps must be a list")
            return cls(changes, header, tuple(_patch_id_from_data(d) for d in deps))
        except (KeyError, TypeError, ValueError) as exc:
            raise OjoError(f"malformed patch: {exc}") from exc

    def _identify(self, patch_id: PatchId) -> Patch:
        changes = Changes(list(self.changes.changes))
        changes.set_patch_id(patch_id)
        return Patch(patch_id, self.header, changes, self.deps)

    def write_out(self, stream: BinaryIO) -> Patch:
        """Serialize to ``stream`` and return the patch identified by the hash of what was written."""
        data = self._to_bytes()
        stream.write(data)
        return self._identify(PatchId.from_digest(hashlib.sha256(data).digest()))


@dataclass(frozen=True)
class Patch:
    """A set of changes with metadata and the id derived from its serialized contents."""

    id: PatchId
    header: PatchHeader
    changes: Changes
    deps: tuple[PatchId, ...]

    @classmethod
    def from_bytes(cls, data: bytes) -> Patch:
        """Read a patch; its id is the SHA-256 hash of ``data``."""
        data = bytes(data)
        try:
            parsed = yaml.safe_load(data)
        except yaml.YAMLError as exc:
            raise OjoError(f"malformed patch: {exc}") from exc
        unidentified = UnidentifiedPatch._from_data(parsed)
        return unidentified._identify(PatchId.from_digest(hashlib.sha256(data).digest()))

    @classmethod
    def from_reader(cls, stream: BinaryIO) -> Patch:
        """Read a patch from a binary stream."""
        return cls.from_bytes(stream.read())