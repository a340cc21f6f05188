"""The changes that make up a patch, and their plain-data form."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Union

from .error import OjoError
from .ids import NodeId, PatchId, _node_id_from_data, _node_id_to_data


@dataclass(frozen=True)
class NewNode:
    """Adds a node with a unique id and the given contents."""

    id: NodeId
    contents: bytes

    def with_patch_id(self, patch_id: PatchId) -> NewNode:
        """This change with the current-patch placeholder replaced by ``patch_id``."""
        return replace(self, id=self.id.with_patch_id(patch_id))


@dataclass(frozen=True)
class DeleteNode:
    """Marks a node as deleted; deleted nodes are never removed."""

    id: NodeId

    def with_patch_id(self, patch_id: PatchId) -> DeleteNode:
        """This change with the current-patch placeholder replaced by ``patch_id``."""
        return replace(self, id=self.id.with_patch_id(patch_id))


@dataclass(frozen=True)
class NewEdge:
    """Adds an ordering edge from ``src`` to ``dest``."""

    src: NodeId
    dest: NodeId

    def with_patch_id(self, patch_id: PatchId) -> NewEdge:
        """This change with the current-patch placeholder replaced by ``patch_id``."""
        return replace(
            self, src=self.src.with_patch_id(patch_id), dest=self.dest.with_patch_id(patch_id)
        )


Change = Union[NewNode, DeleteNode, NewEdge]


def _change_to_data(change: Change) -> dict[str, Any]:
    if isinstance(change, NewNode):
        return {"NewNode": {"id": _node_id_to_data(change.id), "contents": list(change.contents)}}
    if isinstance(change, DeleteNode):
        return {"DeleteNode": {"id": _node_id_to_data(change.id)}}
    return {"NewEdge": {"src": _node_id_to_data(change.src), "dest": _node_id_to_data(change.dest)}}


def _contents_from_data(value: Any) -> bytes:
    if not isinstance(value, list):
        raise TypeError("contents must be a list of bytes")
    return bytes(value)


def _change_from_data(item: Any) -> Change:
    if not isinstance(item, dict) or len(item) != 1:
        raise OjoError(f"malformed change: {item!r}")
    ((kind, body),) = item.items()
    try:
        if kind == "NewNode":
            return NewNode(_node_id_from_data(body["id"]), _contents_from_data(body["contents"]))
        if kind == "DeleteNode":
            return DeleteNode(_node_id_from_data(body["id"]))
        if kind == "NewEdge":
            return NewEdge(_node_id_from_data(body["src"]), _node_id_from_data(body["dest"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise OjoError(f"malformed {kind} change: {exc}") from exc
    raise OjoError(f"unknown change kind {kind!r}")


@dataclass
class Changes:
    """An ordered list of changes: the substance of a patch."""

    changes: list[Change] = field(default_factory=list)

    def set_patch_id(self, patch_id: PatchId) -> None:
        """Replace the current-patch placeholder in every change by ``patch_id``."""
        self.changes = [ch.with_patch_id(patch_id) for ch in self.changes]

    def to_data(self) -> list[dict[str, Any]]:
        """Plain data (lists, dicts, strings, ints) suitable for YAML."""
        return [_change_to_data(ch) for ch in self.changes]

    @classmethod
    def from_data(cls, data: Any) -> Changes:
        """Read the form produced by :meth:`to_data`."""
        if not isinstance(data, list):
            raise OjoError("expected a list of changes")
        return cls([_change_from_data(item) for item in data])