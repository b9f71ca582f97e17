"""Target templates and the Target composition operations.

A target is a buildable unit of a project: a native application, a bundle, or
an aggregate that only runs its phases and dependencies. Targets never hold
other entities directly; build phases, dependencies and the product reference
are stored as identifiers and resolved through the registry on access.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from typing import Any, TypeVar

from . import buildphase
from . import dependency as target_dependency
from .buildphase import BuildPhase
from .dependency import TargetDependency
from .errors import BuildPhaseNotFound, UnknownTargetKind
from .group import FileReference
from .resource import Resource, resource

logger = logging.getLogger(__name__)

R = TypeVar("R")

Configure = Callable[[R], None]


class ProductType(Enum):
    APPLICATION = "com.apple.product-type.application"
    BUNDLE = "com.apple.product-type.bundle"
    FRAMEWORK = "com.apple.product-type.framework"
    STATIC_LIBRARY = "com.apple.product-type.library.static"
    DYNAMIC_LIBRARY = "com.apple.product-type.library.dynamic"
    TOOL = "com.apple.product-type.tool"
    UNIT_TEST_BUNDLE = "com.apple.product-type.bundle.unit-test"


# -- Templates --


def native() -> dict[str, Any]:
    """Default properties for a native target."""
    return {
        "isa": "PBXNativeTarget",
        "buildConfigurationList": None,
        "buildPhases": [],
        "buildRules": [],
        "dependencies": [],
        "name": "",
        "productName": "",
        "productReference": None,
        "productType": ProductType.APPLICATION.value,
    }


def bundle() -> dict[str, Any]:
    """A native target producing a bundle."""
    return native() | {"productType": ProductType.BUNDLE.value}


def aggregate() -> dict[str, Any]:
    """Default properties for an aggregate target (no product, no build rules)."""
    return {
        "isa": "PBXAggregateTarget",
        "buildConfigurationList": None,
        "buildPhases": [],
        "dependencies": [],
        "name": "",
        "productName": "",
    }


_TEMPLATES: dict[str, Callable[[], dict[str, Any]]] = {
    "native": native,
    "bundle": bundle,
    "aggregate": aggregate,
}


def template(kind: str) -> dict[str, Any]:
    """Return a fresh default property set for a target kind."""
    if kind not in _TEMPLATES:
        raise UnknownTargetKind(f"Unknown target kind: '{kind}'")
    return _TEMPLATES[kind]()


def _flatten(kinds: Iterable[Any]) -> Iterator[str]:
    for kind in kinds:
        if kind is None:
            continue
        if isinstance(kind, (list, tuple)):
            yield from _flatten(kind)
        else:
            yield kind


# -- Handle --


@resource("PBXNativeTarget", "PBXAggregateTarget")
class Target(Resource):
    """A buildable unit composed of build phases, dependencies and a product."""

    @property
    def name(self) -> str:
        return self["name"]

    @name.setter
    def name(self, value: str) -> None:
        self["name"] = value

    @property
    def product_name(self) -> str:
        return self["productName"]

    @product_name.setter
    def product_name(self, value: str) -> None:
        self["productName"] = value

    @property
    def build_phases(self) -> list[BuildPhase]:
        return [self.resolve(identifier) for identifier in self["buildPhases"]]  # type: ignore[misc]

    @property
    def dependencies(self) -> list[TargetDependency]:
        return [self.resolve(identifier) for identifier in self["dependencies"]]  # type: ignore[misc]

    @property
    def product_reference(self) -> FileReference | None:
        identifier = self.get("productReference")
        return self.resolve(identifier) if identifier else None  # type: ignore[return-value]

    # -- Build phase lookup --

    def find_build_phase(self, kind: str) -> BuildPhase | None:
        """Return the first build phase of the given kind, or None."""
        isa = buildphase.phase_type(kind)
        for identifier in self["buildPhases"]:
            if self.registry.resolve(identifier)["isa"] == isa:
                return self.resolve(identifier)  # type: ignore[return-value]
        return None

    def build_phase(
        self,
        kind: str,
        configure: Configure[BuildPhase] | None = None,
    ) -> BuildPhase:
        """Return the first build phase of the given kind, optionally configuring it.

        Raises BuildPhaseNotFound when the target has no phase of that kind.
        """
        phase = self.find_build_phase(kind)
        if phase is None:
            raise BuildPhaseNotFound(f"Target '{self.name}' has no {kind} build phase")
        if configure is not None:
            configure(phase)
        return phase

    def sources_build_phase(self, configure: Configure[BuildPhase] | None = None) -> BuildPhase:
        return self.build_phase("sources", configure)

    def resources_build_phase(self, configure: Configure[BuildPhase] | None = None) -> BuildPhase:
        return self.build_phase("resources", configure)

    def frameworks_build_phase(self, configure: Configure[BuildPhase] | None = None) -> BuildPhase:
        return self.build_phase("frameworks", configure)

    def run_script_build_phase(self, configure: Configure[BuildPhase] | None = None) -> BuildPhase:
        return self.build_phase("run_script", configure)

    def copy_headers_build_phase(
        self, configure: Configure[BuildPhase] | None = None
    ) -> BuildPhase:
        return self.build_phase("copy_headers", configure)

    # -- Composition --

    def create_build_phase(
        self,
        kind: str,
        configure: Configure[BuildPhase] | None = None,
    ) -> BuildPhase:
        """Register a new build phase and append it to this target's phases.

        A new phase is created on every call, even if the target already has
        one of the same kind. If `configure` raises, the phase is removed again.
        """
        phase: BuildPhase = self.registry.register(  # type: ignore[assignment]
            buildphase.template(kind), project=self.project
        )
        self["buildPhases"].append(phase.identifier)
        logger.debug("Target '%s' added %s build phase %s", self.name, kind, phase.identifier)

        if configure is not None:
            try:
                configure(phase)
            except BaseException:
                self._discard_build_phases([phase.identifier])
                raise

        return phase.save()

    def create_build_phases(
        self,
        *kinds: str | Iterable[str] | None,
        configure: Configure[BuildPhase] | None = None,
    ) -> list[BuildPhase]:
        """Create one build phase per kind, in the order given.

        Either every phase is created or, if one fails, none are kept.
        """
        flat = list(_flatten(kinds))
        for kind in flat:
            buildphase.phase_type(kind)

        created: list[BuildPhase] = []
        try:
            for kind in flat:
                created.append(self.create_build_phase(kind, configure))
        except BaseException:
            self._discard_build_phases([phase.identifier for phase in created])
            raise
        return created

    def _discard_build_phases(self, identifiers: list[str]) -> None:
        phases = self["buildPhases"]
        for identifier in identifiers:
            if identifier in phases:
                phases.remove(identifier)
            self.registry._discard(identifier)
        if identifiers:
            logger.debug("Target '%s' discarded %d build phase(s)", self.name, len(identifiers))

    def add_dependency(self, target: Target) -> TargetDependency:
        """Declare that this target depends on `target`."""
        if target.registry is not self.registry:
            raise ValueError(f"Target '{target.name}' belongs to a different registry")
        if target.identifier == self.identifier:
            raise ValueError(f"Target '{self.name}' cannot depend on itself")

        dep: TargetDependency = self.registry.register(  # type: ignore[assignment]
            target_dependency.default(), project=self.project
        )
        dep.create_dependency_on(target)
        self["dependencies"].append(dep.identifier)
        self.save()
        logger.debug("Target '%s' depends on '%s'", self.name, target.name)
        return dep

    def create_product_reference(self, name: str) -> FileReference:
        """Create the product file reference in the project's products group."""
        if self.isa == "PBXAggregateTarget":
            raise ValueError(f"Aggregate target '{self.name}' has no product")
        if self.project is None:
            raise RuntimeError(f"Target '{self.name}' is not attached to a project")
        product = self.project.products_group.create_product_reference(name)
        self["productReference"] = product.identifier
        self.save()
        return product
