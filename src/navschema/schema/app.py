"""The application's navigation tree.

Built once at import time. Screen components are referenced by identifier
only; the runtimes map these to real components.
"""

from navschema.schema.types import (
    DrawerGroup,
    NavigationSchema,
    NavigatorOptions,
    Screen,
    ScreenOptions,
    StackGroup,
    TabGroup,
)

ROOT_NAME = "Root"
DRAWER_NAME = "(drawer)"
TABS_NAME = "(tabs)"


_tabs = TabGroup(
    name=TABS_NAME,
    initial_route_name="home",
    options=ScreenOptions(title="Vidream Main", hidden_from_menu=True),
    child_defaults=ScreenOptions(header_shown=False),
    children=(
        Screen(
            name="home",
            render="HomeScreen",
            options=ScreenOptions(title="Home", tab_bar_icon_name="home"),
            link="/drawer/home",
        ),
        Screen(
            name="account",
            render="AccountScreen",
            options=ScreenOptions(title="Account", tab_bar_icon_name="person"),
            link="/drawer/account",
        ),
        Screen(
            name="subs",
            render="SubsScreen",
            options=ScreenOptions(title="Subscriptions", tab_bar_icon_name="subscriptions"),
            link="/drawer/subs",
        ),
    ),
)

_drawer = DrawerGroup(
    name=DRAWER_NAME,
    initial_route_name=TABS_NAME,
    options=ScreenOptions(header_shown=False),
    own_options=NavigatorOptions(
        default_status="closed",
        drawer_style={"backgroundColor": "white", "width": 280},
        overlay_color="rgba(0, 0, 0, 0.5)",
    ),
    child_defaults=ScreenOptions(header_shown=True),
    children=(
        _tabs,
        Screen(
            name="settings",
            render="SettingsScreen",
            options=ScreenOptions(title="Settings", drawer_label="Settings"),
            link="/drawer/settings",
        ),
        Screen(
            name="options",
            render="OptionsScreen",
            options=ScreenOptions(title="Options", drawer_label="Options"),
            link="/drawer/options",
        ),
    ),
)

APP_SCHEMA = NavigationSchema(
    roots=(
        StackGroup(
            name=ROOT_NAME,
            initial_route_name=DRAWER_NAME,
            child_defaults=ScreenOptions(header_shown=False),
            children=(_drawer,),
        ),
    )
)
