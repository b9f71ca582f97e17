"""Project model — owns the registry and every target in it."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field, InstanceOf, PrivateAttr

from . import group
from . import target as target_templates
from .group import Group
from .registry import Registry
from .target import Configure, Target

logger = logging.getLogger(__name__)


def root_object() -> dict[str, Any]:
    return {
        "isa": "PBXProject",
        "buildConfigurationList": None,
        "mainGroup": None,
        "productRefGroup": None,
        "targets": [],
    }


class Project(BaseModel):
    """Root of the object graph; apps may subclass with extra fields."""

    model_config = {"arbitrary_types_allowed": True}

    name: str
    registry: InstanceOf[Registry] = Field(default_factory=Registry)

    _identifier: str = PrivateAttr(default="")

    def model_post_init(self, __context: Any) -> None:
        root = root_object()
        main_group = self.registry.add_object(group.group())
        products_group = self.registry.add_object(group.group("Products"))
        self.registry.resolve(main_group)["children"].append(products_group)
        root["mainGroup"] = main_group
        root["productRefGroup"] = products_group
        self._identifier = self.registry.add_object(root)
        logger.debug("Registered project '%s' as %s", self.name, self._identifier)

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def root(self) -> dict[str, Any]:
        """The registered PBXProject properties."""
        return self.registry.resolve(self._identifier)

    @property
    def main_group(self) -> Group:
        return self.registry.object(self.root["mainGroup"], project=self)  # type: ignore[return-value]

    @property
    def products_group(self) -> Group:
        return self.registry.object(self.root["productRefGroup"], project=self)  # type: ignore[return-value]

    @property
    def targets(self) -> list[Target]:
        return [
            self.registry.object(identifier, project=self)  # type: ignore[misc]
            for identifier in self.root["targets"]
        ]

    def target(self, name: str) -> Target:
        """Return the first target with the given name."""
        for tgt in self.targets:
            if tgt.name == name:
                return tgt
        raise KeyError(f"Project '{self.name}' has no target named '{name}'")

    def create_target(
        self,
        name: str,
        kind: str = "native",
        configure: Configure[Target] | None = None,
    ) -> Target:
        """Register a new target of the given kind and add it to the project."""
        properties = target_templates.template(kind)
        properties["name"] = name
        properties["productName"] = name

        tgt: Target = self.registry.register(properties, project=self)  # type: ignore[assignment]
        self.root["targets"].append(tgt.identifier)
        logger.info("Created %s target '%s'", kind, name)

        if configure is not None:
            configure(tgt)

        return tgt.save()
