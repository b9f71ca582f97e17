"""pbxgraph - An identifier-addressed object graph for PBX project documents."""

from .buildphase import BuildPhase as BuildPhase
from .dependency import TargetDependency as TargetDependency
from .errors import BuildPhaseNotFound as BuildPhaseNotFound
from .errors import DanglingIdentifier as DanglingIdentifier
from .errors import PBXGraphError as PBXGraphError
from .errors import UnknownPhaseKind as UnknownPhaseKind
from .errors import UnknownTargetKind as UnknownTargetKind
from .group import FileReference as FileReference
from .group import Group as Group
from .project import Project as Project
from .registry import Registry as Registry
from .resource import Resource as Resource
from .resource import resource as resource
from .target import ProductType as ProductType
from .target import Target as Target
