"""Build phase templates and the BuildPhase handle."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .errors import UnknownPhaseKind
from .resource import Resource, resource

# -- Templates --


def sources() -> dict[str, Any]:
    return {"isa": "PBXSourcesBuildPhase"}


def resources() -> dict[str, Any]:
    return {"isa": "PBXResourcesBuildPhase"}


def frameworks() -> dict[str, Any]:
    return {"isa": "PBXFrameworksBuildPhase"}


def run_script() -> dict[str, Any]:
    return {"isa": "PBXShellScriptBuildPhase"}


def copy_headers() -> dict[str, Any]:
    return {"isa": "PBXHeadersBuildPhase"}


_TEMPLATES: dict[str, Callable[[], dict[str, Any]]] = {
    "sources": sources,
    "resources": resources,
    "frameworks": frameworks,
    "run_script": run_script,
    "copy_headers": copy_headers,
}

PHASE_TYPES: dict[str, str] = {kind: factory()["isa"] for kind, factory in _TEMPLATES.items()}


def template(kind: str) -> dict[str, Any]:
    """Return a fresh default property set for a build phase kind."""
    if kind not in _TEMPLATES:
        raise UnknownPhaseKind(f"Unknown build phase kind: '{kind}'")
    return _TEMPLATES[kind]()


def phase_type(kind: str) -> str:
    """Return the isa a build phase kind maps to."""
    if kind not in PHASE_TYPES:
        raise UnknownPhaseKind(f"Unknown build phase kind: '{kind}'")
    return PHASE_TYPES[kind]


# -- Handle --


@resource(*PHASE_TYPES.values())
class BuildPhase(Resource):
    """An ordered step in a target's build sequence."""

    @property
    def kind(self) -> str:
        """The phase kind name for this phase's isa."""
        for kind, isa in PHASE_TYPES.items():
            if isa == self.isa:
                return kind
        raise UnknownPhaseKind(f"Unrecognized build phase type: '{self.isa}'")
