"""Groups and file references."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Any

from .resource import Resource, resource

logger = logging.getLogger(__name__)

_PRODUCT_FILE_TYPES: dict[str, str] = {
    ".app": "wrapper.application",
    ".framework": "wrapper.framework",
    ".bundle": "wrapper.cfbundle",
    ".xctest": "wrapper.cfbundle",
    ".a": "archive.ar",
    ".dylib": "compiled.mach-o.dylib",
}

# products without an extension are command line tools
_EXECUTABLE_FILE_TYPE = "compiled.mach-o.executable"


def product_file_type(name: str) -> str:
    """Return the explicitFileType for a built product named `name`."""
    suffix = PurePosixPath(name).suffix.lower()
    if not suffix:
        return _EXECUTABLE_FILE_TYPE
    return _PRODUCT_FILE_TYPES.get(suffix, "file")


def group(name: str | None = None) -> dict[str, Any]:
    properties: dict[str, Any] = {
        "isa": "PBXGroup",
        "children": [],
        "sourceTree": "<group>",
    }
    if name is not None:
        properties["name"] = name
    return properties


def product_reference(name: str) -> dict[str, Any]:
    return {
        "isa": "PBXFileReference",
        "explicitFileType": product_file_type(name),
        "includeInIndex": 0,
        "path": name,
        "sourceTree": "BUILT_PRODUCTS_DIR",
    }


@resource("PBXFileReference")
class FileReference(Resource):
    @property
    def name(self) -> str:
        return self.get("name") or self["path"]

    @property
    def path(self) -> str:
        return self["path"]


@resource("PBXGroup")
class Group(Resource):
    """A node in the project's group tree."""

    @property
    def name(self) -> str | None:
        return self.get("name")

    @property
    def children(self) -> list[Resource]:
        return [self.resolve(identifier) for identifier in self["children"]]

    def add_child(self, child: Resource) -> None:
        self["children"].append(child.identifier)

    def create_product_reference(self, name: str) -> FileReference:
        """Register a built product file reference and add it to this group."""
        product: FileReference = self.registry.register(  # type: ignore[assignment]
            product_reference(name), project=self.project
        )
        self.add_child(product)
        self.save()
        logger.debug("Created product reference '%s' in group %s", name, self.identifier)
        return product
