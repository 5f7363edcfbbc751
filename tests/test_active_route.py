from __future__ import annotations

import pytest

from sidebar_nav.schemas.sidebar import ExactMatch, PrefixMatch, SidebarItem, SidebarModel
from sidebar_nav.services.active_route import active_item_ids, is_item_active, is_prefix_match


def _item(item_id: str, match=None, children=None) -> SidebarItem:
    return SidebarItem(id=item_id, title=item_id, icon_key="home", match=match, children=children)


def _organization(parent_match=None) -> SidebarItem:
    return _item(
        "org",
        match=parent_match,
        children=(
            _item("org.profile", ExactMatch(exact="/dashboard/organization/profile")),
            _item("org.users", ExactMatch(exact="/dashboard/organization/users")),
        ),
    )


@pytest.mark.parametrize(
    ("pathname", "prefix", "expected"),
    [
        ("/dashboard/org", "/dashboard/org", True),
        ("/dashboard/org/profile", "/dashboard/org", True),
        ("/dashboard/orgx", "/dashboard/org", False),
        ("/dashboard/org-settings", "/dashboard/org", False),
        ("/dashboard/org", "/dashboard/org/", True),
        ("/dashboard/org/profile", "/dashboard/org/", True),
        ("/dashboard", "/dashboard", True),
        ("/dashboard/warehouse", "/dashboard", True),
        ("/dashboardx", "/dashboard", False),
        ("/dashboard-other", "/dashboard", False),
        ("/dashboard", "/dashboard/org", False),
    ],
)
def test_is_prefix_match(pathname: str, prefix: str, expected: bool) -> None:
    assert is_prefix_match(pathname, prefix) is expected


def test_exact_match_uses_strict_equality() -> None:
    item = _item("home", ExactMatch(exact="/dashboard/start"))

    assert is_item_active(item, "/dashboard/start") is True
    assert is_item_active(item, "/dashboard/start/") is False
    assert is_item_active(item, "/dashboard") is False
    assert is_item_active(item, "/dashboard/warehouse") is False


def test_prefix_match_is_segment_aware() -> None:
    item = _item("warehouse", PrefixMatch(starts_with="/dashboard/warehouse"))

    assert is_item_active(item, "/dashboard/warehouse") is True
    assert is_item_active(item, "/dashboard/warehouse/") is True
    assert is_item_active(item, "/dashboard/warehouse/products/123") is True
    assert is_item_active(item, "/dashboard/warehousex") is False
    assert is_item_active(item, "/dashboard/warehouse-foo") is False
    assert is_item_active(item, "/dashboard/organization") is False


def test_item_without_match_or_children_is_never_active() -> None:
    assert is_item_active(_item("group"), "/dashboard/anything") is False


def test_empty_children_is_not_active() -> None:
    assert is_item_active(_item("empty", children=()), "/dashboard/anything") is False


def test_parent_active_when_any_child_is_active() -> None:
    parent = _organization()

    assert is_item_active(parent, "/dashboard/organization/profile") is True
    assert is_item_active(parent, "/dashboard/organization/users") is True
    assert is_item_active(parent, "/dashboard/warehouse") is False


def test_parent_own_match_is_ignored_when_children_exist() -> None:
    parent = _organization(ExactMatch(exact="/dashboard/organization"))

    assert is_item_active(parent, "/dashboard/organization") is False
    assert is_item_active(parent, "/dashboard/organization/profile") is True


def test_deeply_nested_grandchild_activates_ancestors() -> None:
    grandparent = _item(
        "settings",
        children=(
            _item(
                "settings.team",
                children=(
                    _item("settings.team.members", PrefixMatch(starts_with="/dashboard/settings/team/members")),
                ),
            ),
        ),
    )
    assert is_item_active(grandparent, "/dashboard/settings/team/members/123") is True
    assert is_item_active(grandparent, "/dashboard/settings/team") is False


def test_active_item_ids_returns_trail_in_order() -> None:
    model = SidebarModel(
        main=(
            _item("home", ExactMatch(exact="/dashboard/start")),
            _organization(),
        ),
        footer=(_item("support", PrefixMatch(starts_with="/dashboard/organization")),),
    )

    assert active_item_ids(model, "/dashboard/organization/users") == ["org", "org.users", "support"]
    assert active_item_ids(model, "/dashboard/start") == ["home"]
    assert active_item_ids(model, "/nowhere") == []


def test_active_state_is_derived_without_mutating_model() -> None:
    model = SidebarModel(main=(_organization(),))
    before = model.to_json()

    active_item_ids(model, "/dashboard/organization/profile")

    assert model.to_json() == before
    assert "active" not in before
