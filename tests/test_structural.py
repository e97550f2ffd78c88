"""Deep interpolation over nested data."""
from __future__ import annotations

import copy
import datetime as dt
import re
import unittest
from collections import OrderedDict, namedtuple

from tildetpl import UNDEFINED, CollectingDiagnosticSink, interpolate_deep
from tildetpl.core.values import NodeKind, classify


class _Widget:
    def __init__(self, label: str) -> None:
        self.label = label


Point = namedtuple("Point", "x y")


class StructuralTests(unittest.TestCase):
    def setUp(self) -> None:
        self.sink = CollectingDiagnosticSink()

    def deep(self, value, context=None):
        return interpolate_deep(value, context or {}, sink=self.sink)

    def test_objects_are_interpolated_recursively(self) -> None:
        template = {
            "path": "user/~{id}",
            "label": '~{active ? "enabled" : "disabled"}',
            "meta": {"env": "~{env}"},
        }
        ctx = {"id": 42, "active": True, "env": "prod"}
        self.assertEqual(
            self.deep(template, ctx),
            {"path": "user/42", "label": "enabled", "meta": {"env": "prod"}},
        )

    def test_lists(self) -> None:
        self.assertEqual(self.deep(["~{a}", "~{b}", "static"], {"a": "X", "b": "Y"}), ["X", "Y", "static"])

    def test_nested_lists_and_objects(self) -> None:
        template = {"items": [{"name": "~{user1}"}, {"name": "~{user2}"}]}
        ctx = {"user1": "Alice", "user2": "Bob"}
        self.assertEqual(self.deep(template, ctx), {"items": [{"name": "Alice"}, {"name": "Bob"}]})

    def test_tuples_stay_tuples(self) -> None:
        out = self.deep(("~{a}", 1, ["~{a}"]), {"a": "A"})
        self.assertEqual(out, ("A", 1, ["A"]))
        self.assertIs(type(out), tuple)

    def test_scalars_are_returned_unchanged(self) -> None:
        for value in (42, 3.5, True, False, None, UNDEFINED):
            with self.subTest(value=value):
                self.assertIs(self.deep(value), value)

    def test_opaque_values_keep_identity(self) -> None:
        created = dt.datetime(2024, 1, 2, 3, 4, 5)
        pattern = re.compile("~{x}")
        widget = _Widget("~{x}")
        payload = b"~{x}"
        out = self.deep(
            {"createdAt": created, "re": pattern, "w": widget, "raw": payload},
            {"x": "X"},
        )
        self.assertIs(out["createdAt"], created)
        self.assertIs(out["re"], pattern)
        self.assertIs(out["w"], widget)
        self.assertEqual(widget.label, "~{x}")
        self.assertIs(out["raw"], payload)

    def test_top_level_opaque_value(self) -> None:
        created = dt.date(2024, 5, 6)
        self.assertIs(self.deep(created), created)

    def test_container_subclasses_are_opaque(self) -> None:
        od = OrderedDict(a="~{x}")
        point = Point("~{x}", "~{y}")
        out = self.deep({"od": od, "pt": point, "s": {"~{x}"}}, {"x": "X", "y": "Y"})
        self.assertIs(out["od"], od)
        self.assertIs(out["pt"], point)
        self.assertEqual(out["s"], {"~{x}"})

    def test_keys_and_order_are_preserved(self) -> None:
        template = {"~{k}": "~{v}", "b": 1, "a": 2}
        out = self.deep(template, {"k": "K", "v": "V"})
        self.assertEqual(list(out), ["~{k}", "b", "a"])
        self.assertEqual(out["~{k}"], "V")

    def test_inputs_are_not_mutated(self) -> None:
        template = {"a": ["~{x}", {"b": "~{y}"}]}
        snapshot = copy.deepcopy(template)
        out = self.deep(template, {"x": 1, "y": 2})
        self.assertEqual(template, snapshot)
        self.assertIsNot(out, template)
        self.assertIsNot(out["a"], template["a"])
        self.assertIsNot(out["a"][1], template["a"][1])

    def test_failures_are_reported_and_preserved(self) -> None:
        out = self.deep({"ok": "~{a}", "bad": ["~{bad!}"]}, {"a": "A"})
        self.assertEqual(out, {"ok": "A", "bad": ["~{bad!}"]})
        self.assertEqual(self.sink.expressions, ["bad!"])

    def test_empty_containers(self) -> None:
        self.assertEqual(self.deep({}), {})
        self.assertEqual(self.deep([]), [])
        self.assertEqual(self.deep(()), ())


class ClassifyTests(unittest.TestCase):
    def test_node_kinds(self) -> None:
        self.assertIs(classify("x"), NodeKind.TEXT)
        self.assertIs(classify([]), NodeKind.SEQUENCE)
        self.assertIs(classify(()), NodeKind.SEQUENCE)
        self.assertIs(classify({}), NodeKind.MAPPING)
        for scalar in (1, 1.5, True, None, UNDEFINED):
            with self.subTest(scalar=scalar):
                self.assertIs(classify(scalar), NodeKind.SCALAR)
        for opaque in (dt.datetime.now(), re.compile("x"), _Widget("x"), OrderedDict(), set(), b""):
            with self.subTest(opaque=opaque):
                self.assertIs(classify(opaque), NodeKind.OPAQUE)
