"""Target dependencies — directional links between targets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

from .resource import Resource, resource

if TYPE_CHECKING:
    from .target import Target

logger = logging.getLogger(__name__)

# proxyType for a proxy that points at a target in the same project
TARGET_PROXY_TYPE = "1"


def default() -> dict[str, Any]:
    """Default properties for an unbound target dependency."""
    return {
        "isa": "PBXTargetDependency",
        "target": None,
        "targetProxy": None,
    }


def container_item_proxy() -> dict[str, Any]:
    return {
        "isa": "PBXContainerItemProxy",
        "containerPortal": None,
        "proxyType": TARGET_PROXY_TYPE,
        "remoteGlobalIDString": None,
        "remoteInfo": "",
    }


@resource("PBXTargetDependency")
class TargetDependency(Resource):
    """Records that the owning target must build after another target."""

    @property
    def target(self) -> Target | None:
        identifier = self.get("target")
        return self.resolve(identifier) if identifier else None  # type: ignore[return-value]

    @property
    def target_proxy(self) -> Resource | None:
        identifier = self.get("targetProxy")
        return self.resolve(identifier) if identifier else None

    def create_dependency_on(self, target: Target) -> Self:
        """Bind this dependency to the target it depends on."""
        proxy = container_item_proxy()
        proxy["remoteGlobalIDString"] = target.identifier
        proxy["remoteInfo"] = target.name
        if target.project is not None:
            proxy["containerPortal"] = target.project.identifier

        self["target"] = target.identifier
        self["targetProxy"] = self.registry.add_object(proxy)
        logger.debug("Dependency %s bound to target '%s'", self.identifier, target.name)
        return self.save()
