"""
Tests for navschema.resolver.validator

Covers:
  - validate_schema()           dangling initial routes, duplicates, shadowing
  - validate_schema(strict=True)
  - dangling_initial_routes()
  - validate_document()         wire JSON Schema check
"""
from __future__ import annotations

import pytest

from navschema.resolver.validator import (
    ValidationIssue,
    dangling_initial_routes,
    validate_document,
    validate_schema,
)
from navschema.schema import (
    APP_SCHEMA,
    DrawerGroup,
    NavigationSchema,
    Screen,
    ScreenOptions,
    StackGroup,
    TabGroup,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _schema(*roots) -> NavigationSchema:
    return NavigationSchema(roots=roots)


# ---------------------------------------------------------------------------
# validate_schema
# ---------------------------------------------------------------------------


class TestValidateSchema:
    def test_app_schema_is_valid(self):
        assert validate_schema(APP_SCHEMA) == []

    def test_dangling_initial_route(self):
        schema = _schema(
            StackGroup(name="S", initial_route_name="missing", children=(Screen(name="a"),))
        )
        issues = validate_schema(schema)
        assert len(issues) == 1
        assert issues[0].severity == "error"
        assert issues[0].group == "S"
        assert issues[0].reference == "missing"
        assert "expected one of: a" in issues[0].message

    def test_initial_route_must_be_direct_child(self):
        tabs = TabGroup(name="T", children=(Screen(name="home"),))
        schema = _schema(DrawerGroup(name="D", initial_route_name="home", children=(tabs,)))
        assert [(i.group, i.reference) for i in validate_schema(schema)] == [("D", "home")]

    def test_reports_every_dangling_route(self):
        inner = StackGroup(name="inner", initial_route_name="x", children=())
        outer = StackGroup(name="outer", initial_route_name="y", children=(inner,))
        assert dangling_initial_routes(_schema(outer)) == [("outer", "y"), ("inner", "x")]

    def test_duplicate_sibling_names(self):
        schema = _schema(StackGroup(name="S", children=(Screen(name="a"), Screen(name="a"))))
        issues = validate_schema(schema)
        assert [i.message for i in issues] == ["Duplicate child name 'a'"]

    def test_shadowed_name_is_warning(self):
        b = StackGroup(name="B", children=(Screen(name="X"),))
        schema = _schema(StackGroup(name="A", children=(Screen(name="X"), b)))
        issues = validate_schema(schema)
        assert len(issues) == 1
        assert issues[0].severity == "warning"
        assert issues[0].path == "A/B/X"
        assert "A/X" in issues[0].message

    def test_strict_escalates_warnings(self):
        b = StackGroup(name="B", children=(Screen(name="X"),))
        schema = _schema(StackGroup(name="A", children=(Screen(name="X"), b)))
        issues = validate_schema(schema, strict=True)
        assert [i.severity for i in issues] == ["error"]

    def test_legacy_hidden_style_is_warning(self):
        hidden = Screen(name="h", options=ScreenOptions(drawer_item_style={"display": "none"}))
        issues = validate_schema(_schema(DrawerGroup(name="D", children=(hidden,))))
        assert len(issues) == 1
        assert issues[0].severity == "warning"
        assert "hiddenFromMenu" in issues[0].message

    def test_legacy_style_with_flag_is_fine(self):
        hidden = Screen(
            name="h",
            options=ScreenOptions(drawer_item_style={"display": "none"}, hidden_from_menu=True),
        )
        assert validate_schema(_schema(DrawerGroup(name="D", children=(hidden,)))) == []


class TestValidationIssue:
    def test_str_with_path(self):
        issue = ValidationIssue(group="S", message="bad", path="Root/S")
        assert str(issue) == "[ERROR] S at Root/S: bad"

    def test_str_without_path(self):
        issue = ValidationIssue(group="S", message="bad", severity="warning")
        assert str(issue) == "[WARNING] S: bad"


# ---------------------------------------------------------------------------
# validate_document
# ---------------------------------------------------------------------------


class TestValidateDocument:
    def test_app_schema_document_is_valid(self):
        assert validate_document(APP_SCHEMA.to_dict()) == []

    @pytest.mark.parametrize(
        "node",
        [
            {"name": "x"},
            {"kind": "screen"},
            {"kind": "stack", "name": ""},
            {"kind": "modal", "name": "x"},
        ],
    )
    def test_malformed_nodes_rejected(self, node):
        assert validate_document({"roots": [node]}) != []

    def test_tabs_may_not_nest_groups(self):
        document = {
            "roots": [
                {
                    "kind": "tabs",
                    "name": "T",
                    "children": [{"kind": "stack", "name": "S", "children": []}],
                }
            ]
        }
        issues = validate_document(document)
        assert issues
        assert issues[0].group == "<document>"

    def test_missing_roots(self):
        issues = validate_document({})
        assert any("roots" in i.message for i in issues)
