"""Object registry — the single owner of every entity in the project graph."""

from __future__ import annotations

import copy
import logging
import uuid
from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from .errors import DanglingIdentifier
from .resource import Resource, resource_class

if TYPE_CHECKING:
    from .project import Project

logger = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 16


def generate_identifier() -> str:
    """Mint a 24 character upper-case hex identifier."""
    return uuid.uuid4().hex.upper()[:24]


class Registry(Mapping[str, dict[str, Any]]):
    """Stores entity properties keyed by generated identifiers."""

    def __init__(self, id_factory: Callable[[], str] = generate_identifier) -> None:
        self._id_factory = id_factory
        self._objects: dict[str, dict[str, Any]] = {}

    def _mint(self) -> str:
        for _ in range(_MAX_ID_ATTEMPTS):
            identifier = self._id_factory()
            if identifier not in self._objects:
                return identifier
            logger.debug("Identifier collision on %s; retrying", identifier)
        raise RuntimeError(f"Unable to mint a unique identifier after {_MAX_ID_ATTEMPTS} attempts")

    def add_object(self, properties: Mapping[str, Any]) -> str:
        """Register an entity and return its new identifier."""
        if "isa" not in properties:
            raise ValueError("Cannot register an object without an 'isa'")
        identifier = self._mint()
        self._objects[identifier] = copy.deepcopy(dict(properties))
        logger.debug("Registered %s as %s", properties["isa"], identifier)
        return identifier

    def resolve(self, identifier: str) -> dict[str, Any]:
        """Return the stored properties for an identifier."""
        try:
            return self._objects[identifier]
        except KeyError:
            raise DanglingIdentifier(identifier) from None

    def set_object(self, identifier: str, properties: Mapping[str, Any]) -> None:
        """Replace the properties stored under an existing identifier."""
        current = self.resolve(identifier)
        if current is not properties:
            self._objects[identifier] = copy.deepcopy(dict(properties))

    def _discard(self, identifier: str) -> None:
        """Forget an identifier minted by a creation that did not complete."""
        self._objects.pop(identifier, None)
        logger.debug("Discarded %s", identifier)

    def object(self, identifier: str, project: Project | None = None) -> Resource:
        """Wrap a registered entity in the handle class for its isa."""
        cls = resource_class(self.resolve(identifier)["isa"])
        return cls(identifier, self, project=project)

    def register(
        self,
        properties: Mapping[str, Any],
        project: Project | None = None,
    ) -> Resource:
        """Register an entity and return its handle."""
        return self.object(self.add_object(properties), project=project)

    def __getitem__(self, identifier: str) -> dict[str, Any]:
        return self.resolve(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._objects

    def __iter__(self) -> Iterator[str]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self) -> str:
        return f"Registry(objects={len(self._objects)})"
