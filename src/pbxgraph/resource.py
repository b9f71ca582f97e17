"""Resource handle and isa-based class registration."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from .project import Project
    from .registry import Registry

logger = logging.getLogger(__name__)

# -- Resource Registry --

_resource_registry: dict[str, type[Resource]] = {}


def resource(*isa: str):
    """Register a Resource subclass as the handle for the given discriminators."""

    def decorator(cls):
        for name in isa:
            _resource_registry[name] = cls
        return cls

    return decorator


def resource_class(isa: str) -> type[Resource]:
    """Return the handle class for a discriminator (plain Resource if unknown)."""
    return _resource_registry.get(isa, Resource)


# -- Resource --


class Resource:
    """A view onto one registered entity, addressed by its identifier."""

    def __init__(
        self,
        identifier: str,
        registry: Registry,
        project: Project | None = None,
    ) -> None:
        self.identifier = identifier
        self.registry = registry
        self.project = project

    @property
    def properties(self) -> dict[str, Any]:
        """The canonical properties held by the registry."""
        return self.registry.resolve(self.identifier)

    @property
    def isa(self) -> str:
        return self.properties["isa"]

    def __getitem__(self, key: str) -> Any:
        return self.properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.properties[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.properties

    def __iter__(self) -> Iterator[str]:
        return iter(self.properties)

    def get(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def resolve(self, identifier: str) -> Resource:
        """Wrap another entity of the same registry, sharing this handle's project."""
        return self.registry.object(identifier, project=self.project)

    def save(self) -> Self:
        """Finalize the entity.

        Handles already write through to the registry, so nothing is copied;
        the identifier must still resolve or DanglingIdentifier is raised.
        """
        self.registry.set_object(self.identifier, self.properties)
        logger.debug("Saved %s %s", self.isa, self.identifier)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self.registry is other.registry and self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash((id(self.registry), self.identifier))

    def __repr__(self) -> str:
        props = self.registry.get(self.identifier) or {}
        return f"{type(self).__name__}(identifier={self.identifier!r}, isa={props.get('isa')!r})"
