from __future__ import annotations

from collections.abc import Iterable

from sidebar_nav.schemas.entitlements import Entitlements
from sidebar_nav.schemas.permissions import PermissionSnapshot
from sidebar_nav.schemas.sidebar import DisabledReason, SidebarVisibilityRules
from sidebar_nav.services.permission_matcher import (
    CompiledAllowList,
    PermissionMatcher,
    get_default_matcher,
)


def enabled_modules(entitlements: Entitlements | None) -> frozenset[str]:
    """Fail-closed: no subscription means no enabled modules."""
    if entitlements is None:
        return frozenset()
    return entitlements.enabled_modules


def _all_granted(compiled: CompiledAllowList, required: Iterable[str]) -> bool:
    return all(compiled.satisfies(permission) for permission in required)


def _any_granted(compiled: CompiledAllowList, required: Iterable[str]) -> bool:
    return any(compiled.satisfies(permission) for permission in required)


def explain_visibility(
    rules: SidebarVisibilityRules | None,
    snapshot: PermissionSnapshot,
    entitlements: Entitlements | None,
    *,
    matcher: PermissionMatcher | None = None,
) -> DisabledReason | None:
    """Return ``None`` when visible, otherwise the axis that failed first.

    Permission axes are checked before module axes. ``snapshot.deny`` is never
    consulted.
    """
    if rules is None:
        return None

    if rules.requires_permissions or rules.requires_any_permissions:
        compiled = (matcher or get_default_matcher()).compile(snapshot.allow)
        if rules.requires_permissions and not _all_granted(compiled, rules.requires_permissions):
            return "permission"
        if rules.requires_any_permissions and not _any_granted(
            compiled, rules.requires_any_permissions
        ):
            return "permission"

    modules = enabled_modules(entitlements)
    if rules.requires_modules and not all(module in modules for module in rules.requires_modules):
        return "entitlement"
    if rules.requires_any_modules and not any(
        module in modules for module in rules.requires_any_modules
    ):
        return "entitlement"

    return None


def is_visible(
    rules: SidebarVisibilityRules | None,
    snapshot: PermissionSnapshot,
    entitlements: Entitlements | None,
    *,
    matcher: PermissionMatcher | None = None,
) -> bool:
    return explain_visibility(rules, snapshot, entitlements, matcher=matcher) is None
