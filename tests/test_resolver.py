"""Tests for the resolver: name lookup, the root accessor, option merging."""

import pytest

from navschema.resolver import (
    find_by_name,
    find_path,
    get_root,
    iter_nodes,
    merge_options,
    resolve,
    resolve_options,
)
from navschema.schema import (
    APP_SCHEMA,
    DrawerGroup,
    NodeKind,
    Screen,
    ScreenOptions,
    StackGroup,
    TabGroup,
)


# ── Fixtures ──


@pytest.fixture
def scenario_roots():
    """Root(stack) -> Drawer -> [Tabs -> [home, account], settings]."""
    tabs = TabGroup(
        name="Tabs",
        initial_route_name="home",
        children=(
            Screen(name="home", options=ScreenOptions(title="Home")),
            Screen(name="account", options=ScreenOptions(title="Account")),
        ),
    )
    drawer = DrawerGroup(
        name="Drawer",
        initial_route_name="Tabs",
        children=(tabs, Screen(name="settings", options=ScreenOptions(title="Settings"))),
    )
    return (StackGroup(name="Root", initial_route_name="Drawer", children=(drawer,)),)


@pytest.fixture
def shadowed_roots():
    """A -> [X, B -> [X]]"""
    inner_x = Screen(name="X", options=ScreenOptions(title="inner"))
    outer_x = Screen(name="X", options=ScreenOptions(title="outer"))
    b = StackGroup(name="B", children=(inner_x,))
    return (StackGroup(name="A", children=(outer_x, b)),)


# ── find_by_name ──


class TestFindByName:
    def test_end_to_end_leaf(self, scenario_roots):
        node = find_by_name("settings", scenario_roots)
        assert node is not None
        assert node.kind is NodeKind.SCREEN
        assert node.options.title == "Settings"

    def test_end_to_end_group(self, scenario_roots):
        node = find_by_name("Tabs", scenario_roots)
        assert node.kind is NodeKind.TABS
        assert node.initial_route_name == "home"

    def test_first_depth_first_match_wins(self, shadowed_roots):
        node = find_by_name("X", shadowed_roots)
        assert node.options.title == "outer"

    def test_preorder_beats_shallowness(self):
        deep = Screen(name="X", options=ScreenOptions(title="deep"))
        shallow = Screen(name="X", options=ScreenOptions(title="shallow"))
        roots = (StackGroup(name="A", children=(deep,)), shallow)
        assert find_by_name("X", roots).options.title == "deep"

    def test_missing_returns_none(self, scenario_roots):
        assert find_by_name("does-not-exist", scenario_roots) is None

    def test_empty_scope_returns_none(self):
        assert find_by_name("anything", ()) is None

    def test_deterministic(self, scenario_roots):
        assert find_by_name("account", scenario_roots) is find_by_name("account", scenario_roots)

    def test_defaults_to_app_schema(self):
        assert find_by_name("settings") is not None
        assert find_by_name("(tabs)").kind is NodeKind.TABS


class TestFindPath:
    def test_returns_ancestors_root_first(self, scenario_roots):
        node, ancestors = find_path("home", scenario_roots)
        assert node.name == "home"
        assert [a.name for a in ancestors] == ["Root", "Drawer", "Tabs"]

    def test_top_level_has_no_ancestors(self, scenario_roots):
        node, ancestors = find_path("Root", scenario_roots)
        assert ancestors == ()

    def test_missing_returns_none(self, scenario_roots):
        assert find_path("nope", scenario_roots) is None

    def test_iter_nodes_preorder(self, scenario_roots):
        names = [n.name for n, _ in iter_nodes(scenario_roots)]
        assert names == ["Root", "Drawer", "Tabs", "home", "account", "settings"]


# ── get_root ──


class TestGetRoot:
    def test_returns_root_stack(self, scenario_roots):
        root = get_root(nodes=scenario_roots)
        assert root is scenario_roots[0]

    def test_app_root_has_no_siblings(self):
        root = get_root()
        assert root.name == "Root"
        assert APP_SCHEMA.roots == (root,)

    def test_kind_must_match(self, scenario_roots):
        assert get_root(NodeKind.DRAWER, "Root", scenario_roots) is None

    def test_only_top_level_is_searched(self, scenario_roots):
        assert get_root(NodeKind.DRAWER, "Drawer", scenario_roots) is None

    def test_accepts_kind_value(self, scenario_roots):
        assert get_root("stack", "Root", scenario_roots) is scenario_roots[0]

    def test_unknown_kind_returns_none(self, scenario_roots):
        assert get_root("modal", "Root", scenario_roots) is None


# ── Option merging ──


class TestResolveOptions:
    def test_child_overrides_default_and_inherits_rest(self):
        child = Screen(name="c", options=ScreenOptions(title="Child"))
        parent = StackGroup(
            name="G",
            child_defaults=ScreenOptions(header_shown=True, title="G"),
            children=(child,),
        )
        assert resolve_options(child, (parent,)) == {"headerShown": True, "title": "Child"}

    def test_no_cascade_beyond_parent(self):
        grandchild = Screen(name="gc")
        parent = StackGroup(name="P", children=(grandchild,))
        grandparent = StackGroup(
            name="GP",
            child_defaults=ScreenOptions(header_shown=True),
            children=(parent,),
        )
        assert resolve_options(grandchild, (grandparent, parent)) == {}

    def test_style_dicts_merge_key_wise(self):
        child = Screen(
            name="c",
            options=ScreenOptions(extra={"drawerStyle": {"backgroundColor": "white"}}),
        )
        parent = DrawerGroup(
            name="D",
            child_defaults=ScreenOptions(extra={"drawerStyle": {"width": 280}}),
            children=(child,),
        )
        assert resolve_options(child, (parent,)) == {
            "drawerStyle": {"width": 280, "backgroundColor": "white"}
        }

    def test_typed_style_field_merges_too(self):
        child = Screen(name="c", options=ScreenOptions(drawer_item_style={"opacity": 0.5}))
        parent = DrawerGroup(
            name="D",
            child_defaults=ScreenOptions(drawer_item_style={"marginTop": 4}),
            children=(child,),
        )
        assert resolve_options(child, (parent,))["drawerItemStyle"] == {
            "marginTop": 4,
            "opacity": 0.5,
        }

    def test_non_style_dicts_replace(self):
        merged = merge_options({"params": {"a": 1}}, {"params": {"b": 2}})
        assert merged == {"params": {"b": 2}}

    def test_no_ancestors_uses_own_options(self):
        node = Screen(name="c", options=ScreenOptions(title="T"))
        assert resolve_options(node) == {"title": "T"}

    def test_idempotent(self, scenario_roots):
        node, ancestors = find_path("home", scenario_roots)
        assert resolve_options(node, ancestors) == resolve_options(node, ancestors)

    def test_result_is_detached_from_schema(self):
        child = Screen(name="c", options=ScreenOptions(drawer_item_style={"width": 1}))
        out = resolve_options(child)
        out["drawerItemStyle"]["width"] = 2
        assert child.options.drawer_item_style["width"] == 1


class TestResolveAppSchema:
    def test_tab_screen(self):
        resolved = resolve("home")
        assert [a.name for a in resolved.ancestors] == ["Root", "(drawer)", "(tabs)"]
        assert resolved.options == {
            "headerShown": False,
            "title": "Home",
            "tabBarIconName": "home",
        }

    def test_drawer_screen(self):
        assert resolve("settings").options == {
            "headerShown": True,
            "title": "Settings",
            "drawerLabel": "Settings",
        }

    def test_tabs_group_as_drawer_item(self):
        assert resolve("(tabs)").options == {
            "headerShown": True,
            "title": "Vidream Main",
            "hiddenFromMenu": True,
        }

    def test_drawer_inside_root_stack(self):
        resolved = resolve("(drawer)")
        assert resolved.parent.name == "Root"
        assert resolved.options == {"headerShown": False}

    def test_missing(self):
        assert resolve("nope") is None

    def test_to_dict(self):
        data = resolve("account").to_dict()
        assert data["node"]["name"] == "account"
        assert data["ancestors"] == ["Root", "(drawer)", "(tabs)"]
        assert data["options"]["tabBarIconName"] == "person"
