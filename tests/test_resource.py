"""Tests for pbxgraph.resource."""

from __future__ import annotations

import logging

import pytest

from pbxgraph.errors import DanglingIdentifier
from pbxgraph.registry import Registry
from pbxgraph.resource import Resource, _resource_registry, resource, resource_class


class TestResourceDecorator:
    def test_registers_class(self):
        @resource("XCTestWidget")
        class Widget(Resource):
            pass

        assert _resource_registry["XCTestWidget"] is Widget
        assert resource_class("XCTestWidget") is Widget

    def test_registers_multiple_isa(self):
        @resource("XCTestGadgetA", "XCTestGadgetB")
        class Gadget(Resource):
            pass

        assert resource_class("XCTestGadgetA") is Gadget
        assert resource_class("XCTestGadgetB") is Gadget

    def test_returns_class_unchanged(self):
        @resource("XCTestGizmo")
        class Gizmo(Resource):
            pass

        assert Gizmo.__name__ == "Gizmo"

    def test_unknown_falls_back(self):
        assert resource_class("XCNeverRegistered") is Resource


class TestResource:
    def test_isa(self):
        res = Registry().register({"isa": "PBXGroup"})
        assert res.isa == "PBXGroup"

    def test_item_access_is_live(self):
        reg = Registry()
        res = reg.register({"isa": "PBXGroup"})
        res["name"] = "Sources"
        assert reg[res.identifier]["name"] == "Sources"
        assert res["name"] == "Sources"
        assert "name" in res

    def test_get_default(self):
        res = Registry().register({"isa": "PBXGroup"})
        assert res.get("path") is None
        assert res.get("path", "x") == "x"

    def test_iter_keys(self):
        res = Registry().register({"isa": "PBXGroup", "name": "A"})
        assert list(res) == ["isa", "name"]

    def test_save_returns_self(self):
        res = Registry().register({"isa": "PBXGroup"})
        assert res.save() is res

    def test_save_dangling_raises(self):
        res = Resource("MISSING", Registry())
        with pytest.raises(DanglingIdentifier):
            res.save()

    def test_save_logs(self, caplog):
        res = Registry().register({"isa": "PBXBuildRule"})
        with caplog.at_level(logging.DEBUG, logger="pbxgraph.resource"):
            res.save()
        assert "Saved PBXBuildRule" in caplog.text

    def test_equality_by_identifier(self):
        reg = Registry()
        identifier = reg.add_object({"isa": "PBXGroup"})
        assert reg.object(identifier) == reg.object(identifier)
        assert len({reg.object(identifier), reg.object(identifier)}) == 1

    def test_inequality_across_registries(self):
        reg_a = Registry(id_factory=lambda: "SAME")
        reg_b = Registry(id_factory=lambda: "SAME")
        assert reg_a.register({"isa": "PBXGroup"}) != reg_b.register({"isa": "PBXGroup"})

    def test_resolve_shares_project(self):
        reg = Registry()
        child = reg.add_object({"isa": "PBXGroup"})
        parent = Resource(reg.add_object({"isa": "PBXGroup"}), reg, project=None)
        assert parent.resolve(child).identifier == child

    def test_repr(self):
        res = Registry(id_factory=lambda: "ABC").register({"isa": "PBXBuildRule"})
        assert repr(res) == "Resource(identifier='ABC', isa='PBXBuildRule')"

    def test_repr_dangling(self):
        res = Resource("MISSING", Registry())
        assert repr(res) == "Resource(identifier='MISSING', isa=None)"
