"""Exceptions raised while building the project object graph."""

from __future__ import annotations


class PBXGraphError(Exception):
    """Base class for all pbxgraph errors."""


class DanglingIdentifier(PBXGraphError, KeyError):
    """An identifier was resolved that the registry never handed out."""

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"Unknown object identifier: '{self.identifier}'"


class UnknownPhaseKind(PBXGraphError, ValueError):
    """No build phase template exists for the requested kind."""


class UnknownTargetKind(PBXGraphError, ValueError):
    """No target template exists for the requested kind."""


class BuildPhaseNotFound(PBXGraphError, LookupError):
    """A target holds no build phase of the requested kind."""
