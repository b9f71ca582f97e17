"""Tests for pbxgraph.dependency."""

from __future__ import annotations

import logging

from pbxgraph.dependency import TARGET_PROXY_TYPE, TargetDependency, default
from pbxgraph.project import Project
from pbxgraph.registry import Registry
from pbxgraph.target import native


class TestDefault:
    def test_isa(self):
        assert default()["isa"] == "PBXTargetDependency"

    def test_unbound(self):
        props = default()
        assert props["target"] is None
        assert props["targetProxy"] is None

    def test_unbound_handle(self):
        dep = Registry().register(default())
        assert isinstance(dep, TargetDependency)
        assert dep.target is None
        assert dep.target_proxy is None


class TestCreateDependencyOn:
    def test_binds_target(self):
        project = Project(name="test")
        lib = project.create_target("Lib")
        dep = project.registry.register(default(), project=project)
        dep.create_dependency_on(lib)
        assert dep["target"] == lib.identifier
        assert dep.target == lib

    def test_registers_container_proxy(self):
        project = Project(name="test")
        lib = project.create_target("Lib")
        dep = project.registry.register(default(), project=project)
        dep.create_dependency_on(lib)
        proxy = dep.target_proxy
        assert proxy["isa"] == "PBXContainerItemProxy"
        assert proxy["proxyType"] == TARGET_PROXY_TYPE
        assert proxy["remoteGlobalIDString"] == lib.identifier
        assert proxy["remoteInfo"] == "Lib"
        assert proxy["containerPortal"] == project.identifier

    def test_without_project(self):
        reg = Registry()
        lib = reg.register(native() | {"name": "Lib"})
        dep = reg.register(default())
        dep.create_dependency_on(lib)
        assert dep.target_proxy["containerPortal"] is None

    def test_returns_self(self):
        reg = Registry()
        lib = reg.register(native())
        dep = reg.register(default())
        assert dep.create_dependency_on(lib) is dep

    def test_logs_binding(self, caplog):
        reg = Registry()
        lib = reg.register(native() | {"name": "Lib"})
        dep = reg.register(default())
        with caplog.at_level(logging.DEBUG, logger="pbxgraph.dependency"):
            dep.create_dependency_on(lib)
        assert "bound to target 'Lib'" in caplog.text
