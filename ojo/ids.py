"""Identifiers for patches and for the nodes they introduce."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, replace
from typing import Any, Union

from .error import InvalidLength, PatchIdDecodeError

_ID_LEN = 32
_TO_STANDARD = bytes.maketrans(b"-_", b"+/")


def _urlsafe_decode(text: bytes) -> bytes:
    """Strictly decode padded URL-safe base64."""
    if b"+" in text or b"/" in text:
        raise PatchIdDecodeError("invalid character in URL-safe base64")
    try:
        return base64.b64decode(text.translate(_TO_STANDARD), validate=True)
    except binascii.Error as exc:
        raise PatchIdDecodeError(str(exc)) from exc


@dataclass(frozen=True, order=True)
class PatchId:
    """A 32-byte identifier derived by hashing a patch's contents.

    The all-zero id is reserved for the patch currently under construction.
    """

    data: bytes

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != _ID_LEN:
            raise InvalidLength(len(data))
        object.__setattr__(self, "data", data)

    def __repr__(self) -> str:
        return f'PatchId("{self.to_base64()}")'

    @classmethod
    def cur(cls) -> PatchId:
        """The reserved id of the patch under construction."""
        return cls(bytes(_ID_LEN))

    def is_cur(self) -> bool:
        """Whether this is the reserved id returned by :meth:`cur`."""
        return self.data == bytes(_ID_LEN)

    def to_base64(self) -> str:
        """URL-safe base64 of the id, prefixed with ``P`` so it never starts with ``-``."""
        return "P" + base64.urlsafe_b64encode(self.data).decode("ascii")

    @classmethod
    def from_base64(cls, name: Union[str, bytes]) -> PatchId:
        """Parse the form produced by :meth:`to_base64`."""
        if isinstance(name, str):
            try:
                raw = name.encode("ascii")
            except UnicodeEncodeError as exc:
                raise PatchIdDecodeError("non-ASCII character in patch id") from exc
        else:
            raw = bytes(name)
        return cls(_urlsafe_decode(raw[1:]))

    @classmethod
    def from_digest(cls, digest: bytes) -> PatchId:
        """Build an id from a 32-byte hash digest."""
        return cls(bytes(digest))


@dataclass(frozen=True, order=True)
class NodeId:
    """A globally unique node id: the patch that introduced it and its index there."""

    patch: PatchId
    node: int

    def __repr__(self) -> str:
        return f'NodeId("{self.patch.to_base64()}/{self.node}")'

    @classmethod
    def cur(cls, node: int) -> NodeId:
        """An id for a node introduced by the patch under construction."""
        return cls(PatchId.cur(), node)

    def with_patch_id(self, patch_id: PatchId) -> NodeId:
        """This id with the reserved current patch replaced by ``patch_id``."""
        if self.patch.is_cur():
            return replace(self, patch=patch_id)
        return self


def _patch_id_to_data(patch_id: PatchId) -> str:
    return base64.urlsafe_b64encode(patch_id.data).decode("ascii")


def _patch_id_from_data(value: Any) -> PatchId:
    if not isinstance(value, str):
        raise PatchIdDecodeError("expected a base64 string")
    try:
        raw = value.encode("ascii")
    except UnicodeEncodeError as exc:
        raise PatchIdDecodeError("non-ASCII character in patch id") from exc
    return PatchId(_urlsafe_decode(raw))


def _node_id_to_data(node_id: NodeId) -> dict[str, Any]:
    return {"patch": _patch_id_to_data(node_id.patch), "node": node_id.node}


def _node_id_from_data(value: Any) -> NodeId:
    node = value["node"]
    if not isinstance(node, int) or isinstance(node, bool) or node < 0:
        raise ValueError(f"invalid node index {node!r}")
    return NodeId(_patch_id_from_data(value["patch"]), node)