"""Process-wide static navigation definition.

Built once at import, validated, and shared read-only by every request. Slugs
come from ``sidebar_nav.constants``; do not inline raw permission or module
strings here.
"""

from __future__ import annotations

from sidebar_nav.constants.modules import (
    MODULE_ANALYTICS,
    MODULE_HOME,
    MODULE_ORGANIZATION_MANAGEMENT,
    MODULE_SUPPORT,
    MODULE_TEAMS,
    MODULE_WAREHOUSE,
)
from sidebar_nav.constants.permissions import (
    ACCOUNT_PREFERENCES_READ,
    ACCOUNT_PROFILE_READ,
    BRANCHES_READ,
    MEMBERS_MANAGE,
    MEMBERS_READ,
    ORG_READ,
    ORG_UPDATE,
    TEAMS_MEMBERS_READ,
)
from sidebar_nav.core.error_catalog import ErrorCatalog, SidebarError
from sidebar_nav.schemas.sidebar import (
    ExactMatch,
    NavigationDefinition,
    PrefixMatch,
    SidebarItem,
    SidebarSection,
    SidebarVisibilityRules,
)


def _item(item_id: str, title: str, icon_key: str, href: str | None = None, **extra) -> SidebarItem:
    return SidebarItem(
        id=item_id,
        title=title,
        title_key=f"sidebar.{item_id}",
        icon_key=icon_key,
        href=href,
        **extra,
    )


def _requires(*permissions: str) -> SidebarVisibilityRules:
    return SidebarVisibilityRules(requires_permissions=permissions)


def _build_registry() -> NavigationDefinition:
    main = (
        SidebarSection(
            module=MODULE_HOME,
            items=(
                _item("home", "Home", "home", "/dashboard/start", match=ExactMatch(exact="/dashboard/start")),
            ),
        ),
        SidebarSection(
            module=MODULE_WAREHOUSE,
            items=(
                _item(
                    "warehouse",
                    "Warehouse",
                    "warehouse",
                    "/dashboard/warehouse",
                    match=PrefixMatch(starts_with="/dashboard/warehouse"),
                ),
            ),
        ),
        SidebarSection(
            module=MODULE_TEAMS,
            items=(
                _item(
                    "teams",
                    "Teams",
                    "teams",
                    children=(
                        _item(
                            "teams.members",
                            "Members",
                            "users",
                            "/dashboard/teams/members",
                            match=PrefixMatch(starts_with="/dashboard/teams/members"),
                            visibility=_requires(TEAMS_MEMBERS_READ),
                        ),
                        _item(
                            "teams.contacts",
                            "Contacts",
                            "contacts",
                            "/dashboard/teams/contacts",
                            match=PrefixMatch(starts_with="/dashboard/teams/contacts"),
                        ),
                        _item(
                            "teams.chat",
                            "Chat",
                            "chat",
                            "/dashboard/teams/chat",
                            match=PrefixMatch(starts_with="/dashboard/teams/chat"),
                            status="coming_soon",
                        ),
                    ),
                ),
            ),
        ),
        SidebarSection(
            module=MODULE_ORGANIZATION_MANAGEMENT,
            items=(
                _item(
                    "organization",
                    "Organization",
                    "organization",
                    children=(
                        _item(
                            "organization.profile",
                            "Profile",
                            "building",
                            "/dashboard/organization/profile",
                            match=ExactMatch(exact="/dashboard/organization/profile"),
                            visibility=_requires(ORG_READ),
                        ),
                        _item(
                            "organization.billing",
                            "Billing",
                            "billing",
                            "/dashboard/organization/billing",
                            match=PrefixMatch(starts_with="/dashboard/organization/billing"),
                            visibility=_requires(ORG_UPDATE),
                        ),
                        _item(
                            "organization.users",
                            "Users",
                            "users",
                            "/dashboard/organization/users",
                            match=PrefixMatch(starts_with="/dashboard/organization/users"),
                            visibility=_requires(MEMBERS_READ),
                        ),
                        _item(
                            "organization.roles",
                            "Roles",
                            "shield",
                            "/dashboard/organization/roles",
                            match=PrefixMatch(starts_with="/dashboard/organization/roles"),
                            visibility=_requires(MEMBERS_MANAGE),
                        ),
                        _item(
                            "organization.branches",
                            "Branches",
                            "branches",
                            "/dashboard/organization/branches",
                            match=PrefixMatch(starts_with="/dashboard/organization/branches"),
                            visibility=_requires(BRANCHES_READ),
                        ),
                    ),
                ),
            ),
        ),
        SidebarSection(
            module=MODULE_ANALYTICS,
            items=(
                _item(
                    "analytics",
                    "Analytics",
                    "analytics",
                    "/dashboard/analytics",
                    match=PrefixMatch(starts_with="/dashboard/analytics"),
                ),
            ),
        ),
    )
    footer = (
        SidebarSection(
            module=None,
            items=(
                _item(
                    "account",
                    "Account",
                    "user",
                    children=(
                        _item(
                            "account.profile",
                            "Profile",
                            "user",
                            "/dashboard/account/profile",
                            match=ExactMatch(exact="/dashboard/account/profile"),
                            visibility=_requires(ACCOUNT_PROFILE_READ),
                        ),
                        _item(
                            "account.preferences",
                            "Preferences",
                            "settings",
                            "/dashboard/account/preferences",
                            match=PrefixMatch(starts_with="/dashboard/account/preferences"),
                            visibility=_requires(ACCOUNT_PREFERENCES_READ),
                        ),
                    ),
                ),
            ),
        ),
        SidebarSection(
            module=MODULE_SUPPORT,
            items=(
                _item(
                    "support",
                    "Support",
                    "help",
                    "/dashboard/support",
                    match=PrefixMatch(starts_with="/dashboard/support"),
                ),
            ),
        ),
    )
    return NavigationDefinition(main=main, footer=footer)


def _walk(items, seen: dict[str, None]) -> None:
    for item in items:
        if not item.id.strip():
            raise SidebarError(ErrorCatalog.EMPTY_ITEM_ID, details={"title": item.title})
        if item.id in seen:
            raise SidebarError(ErrorCatalog.DUPLICATE_ITEM_ID, details={"id": item.id})
        seen[item.id] = None
        if not item.icon_key.strip():
            raise SidebarError(ErrorCatalog.EMPTY_ICON_KEY, details={"id": item.id})
        _validate_rules(item)
        if item.children:
            _walk(item.children, seen)


def _validate_rules(item: SidebarItem) -> None:
    rules = item.visibility
    if rules is None:
        return
    permissions = (*(rules.requires_permissions or ()), *(rules.requires_any_permissions or ()))
    modules = (*(rules.requires_modules or ()), *(rules.requires_any_modules or ()))
    if any(not slug.strip() for slug in (*permissions, *modules)):
        raise SidebarError(ErrorCatalog.EMPTY_SLUG, details={"id": item.id})
    wildcards = sorted(slug for slug in permissions if "*" in slug)
    if wildcards:
        raise SidebarError(
            ErrorCatalog.WILDCARD_REQUIRED_PERMISSION,
            details={"id": item.id, "permissions": wildcards},
        )


def validate_definition(definition: NavigationDefinition) -> None:
    """Reject definitions that are programming errors. Runs at load time only."""
    seen: dict[str, None] = {}
    for section in (*definition.main, *definition.footer):
        if section.module is not None and not section.module.strip():
            raise SidebarError(ErrorCatalog.EMPTY_SLUG, details={"section": section.module})
        _walk(section.items, seen)


SIDEBAR_REGISTRY = _build_registry()
validate_definition(SIDEBAR_REGISTRY)


def get_sidebar_registry() -> NavigationDefinition:
    return SIDEBAR_REGISTRY
