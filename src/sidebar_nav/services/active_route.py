from __future__ import annotations

from collections.abc import Iterable

from sidebar_nav.schemas.sidebar import ExactMatch, SidebarItem, SidebarModel


def is_prefix_match(pathname: str, prefix: str) -> bool:
    """Segment-aware prefix test: ``/a/b`` matches ``/a/b`` and ``/a/b/...`` only."""
    normalized = prefix[:-1] if prefix.endswith("/") else prefix
    return pathname == normalized or pathname.startswith(f"{normalized}/")


def is_item_active(item: SidebarItem, pathname: str) -> bool:
    # Children take precedence: a parent's own match rule is ignored.
    if item.children:
        return any(is_item_active(child, pathname) for child in item.children)

    match = item.match
    if match is None:
        return False
    if isinstance(match, ExactMatch):
        return pathname == match.exact
    return is_prefix_match(pathname, match.starts_with)


def _collect_active(items: Iterable[SidebarItem], pathname: str, found: list[str]) -> None:
    for item in items:
        if not is_item_active(item, pathname):
            continue
        found.append(item.id)
        if item.children:
            _collect_active(item.children, pathname, found)


def active_item_ids(model: SidebarModel, pathname: str) -> list[str]:
    """Ids of every active item, main before footer, parents before children."""
    found: list[str] = []
    _collect_active(model.main, pathname, found)
    _collect_active(model.footer, pathname, found)
    return found
