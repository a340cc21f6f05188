"""Exceptions raised when working with repositories and patches."""

from __future__ import annotations

from os import PathLike
from typing import Any, Union

_PathArg = Union[str, "PathLike[str]"]


class OjoError(Exception):
    """Base class for every error reported by this package."""


class PatchIdError(OjoError):
    """A patch id could not be read, or two patches share an id."""


class PatchIdDecodeError(PatchIdError):
    """A patch id was not valid URL-safe base64."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class InvalidLength(PatchIdError):
    """A decoded patch id had the wrong number of bytes."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Found the wrong number of bytes: {length}")


class PatchCollision(PatchIdError):
    """Two different patches hash to the same id."""

    def __init__(self, patch_id: Any) -> None:
        self.patch_id = patch_id
        super().__init__(
            f"Encountered a collision between patch hashes: {patch_id.to_base64()}"
        )


class BranchExists(OjoError):
    """A branch with this name already exists."""

    def __init__(self, branch: str) -> None:
        self.branch = branch
        super().__init__(f'The branch "{branch}" already exists')


class CurrentBranch(OjoError):
    """The operation is not allowed on the current branch."""

    def __init__(self, branch: str) -> None:
        self.branch = branch
        super().__init__(f'"{branch}" is the current branch')


class DbCorruption(OjoError):
    """The stored database is inconsistent."""

    def __init__(self) -> None:
        super().__init__("Found corruption in the database")


class IdMismatch(OjoError):
    """A patch's contents hash to a different id than the one asked for."""

    def __init__(self, found: Any, expected: Any) -> None:
        self.found = found
        self.expected = expected
        super().__init__(f"Expected {expected.to_base64()}, found {found.to_base64()}")


class MissingDep(OjoError):
    """A patch depends on a patch that is not known."""

    def __init__(self, patch_id: Any) -> None:
        self.patch_id = patch_id
        super().__init__(f"Missing a dependency: {patch_id.to_base64()}")


class NotOrdered(OjoError):
    """The data does not form a totally ordered file."""

    def __init__(self) -> None:
        super().__init__("The data does not represent a totally ordered file")


class RepoExists(OjoError):
    """A repository already exists at this location."""

    def __init__(self, path: _PathArg) -> None:
        self.path = path
        super().__init__(f'There is already a repository in "{path}"')


class RepoNotFound(OjoError):
    """No repository tracks this location."""

    def __init__(self, path: _PathArg) -> None:
        self.path = path
        super().__init__(f'I could not find a repository tracking this path: "{path}"')


class UnknownBranch(OjoError):
    """There is no branch with this name."""

    def __init__(self, branch: str) -> None:
        self.branch = branch
        super().__init__(f'There is no branch named "{branch}"')


class UnknownNode(OjoError):
    """There is no node with this id."""

    def __init__(self, node_id: Any) -> None:
        self.node_id = node_id
        super().__init__(f"There is no node with id {node_id!r}")


class UnknownPatch(OjoError):
    """There is no patch with this id."""

    def __init__(self, patch_id: Any) -> None:
        self.patch_id = patch_id
        super().__init__(f'There is no patch with hash "{patch_id.to_base64()}"')