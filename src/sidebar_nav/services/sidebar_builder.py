"""Compile a static navigation definition into a per-request ``SidebarModel``.

The builder only decides visibility. Active state is derived later from the
pathname by ``sidebar_nav.services.active_route`` and is never stored in the
model.

Processing per section, depth-first:

1. A section whose module is not enabled by the subscription is dropped whole.
2. A leaf is kept when its visibility rules pass.
3. A parent is kept when at least one child survives; its own rules are not
   consulted.

Output order is definition order. No timestamps or generated ids are added, so
identical inputs serialize to identical JSON.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sidebar_nav.core.config import settings
from sidebar_nav.core.logging import build_log_payload, log_json
from sidebar_nav.registry import get_sidebar_registry
from sidebar_nav.schemas.entitlements import Entitlements
from sidebar_nav.schemas.permissions import PermissionSnapshot
from sidebar_nav.schemas.sidebar import (
    AppContext,
    NavigationDefinition,
    SidebarItem,
    SidebarModel,
    SidebarSection,
    UserContext,
)
from sidebar_nav.services.permission_matcher import PermissionMatcher
from sidebar_nav.services.visibility import enabled_modules, explain_visibility

logger = logging.getLogger(__name__)


class SidebarBuilder:
    def __init__(
        self,
        snapshot: PermissionSnapshot,
        entitlements: Entitlements | None,
        *,
        matcher: PermissionMatcher | None = None,
        log_decisions: bool | None = None,
    ) -> None:
        self.snapshot = snapshot
        self.entitlements = entitlements
        self.matcher = matcher
        self.log_decisions = settings.SIDEBAR_LOG_DECISIONS if log_decisions is None else log_decisions
        self.pruned = 0
        self._modules = enabled_modules(entitlements)

    def build_sections(self, sections: Iterable[SidebarSection]) -> tuple[SidebarItem, ...]:
        items: list[SidebarItem] = []
        for section in sections:
            if section.module is not None and section.module not in self._modules:
                log_json(
                    logger,
                    build_log_payload(
                        "sidebar_section_gated",
                        module=section.module,
                        item_ids=[item.id for item in section.items],
                    ),
                    level=logging.DEBUG,
                )
                continue
            items.extend(self.filter_items(section.items))
        return tuple(items)

    def filter_items(self, items: Iterable[SidebarItem]) -> list[SidebarItem]:
        kept: list[SidebarItem] = []
        for item in items:
            resolved = self._resolve(item)
            if resolved is not None:
                kept.append(resolved)
        return kept

    def _resolve(self, item: SidebarItem) -> SidebarItem | None:
        if item.status == "coming_soon":
            children = self.filter_items(item.children) if item.children else []
            return _emit(item, children, href=None, disabled_reason="coming_soon")

        if item.children is not None:
            children = self.filter_items(item.children)
            if not children:
                self._record_pruned(item, "no_visible_children")
                return None
            return _emit(item, children)

        reason = explain_visibility(
            item.visibility,
            self.snapshot,
            self.entitlements,
            matcher=self.matcher,
        )
        if reason is None:
            return _emit(item, [])
        if item.show_when_disabled:
            return _emit(item, [], href=None, disabled_reason=reason)
        self._record_pruned(item, reason)
        return None

    def _record_pruned(self, item: SidebarItem, reason: str) -> None:
        self.pruned += 1
        if self.log_decisions:
            log_json(
                logger,
                build_log_payload("sidebar_item_pruned", item_id=item.id, reason=reason),
                level=logging.DEBUG,
            )


def _emit(item: SidebarItem, children: list[SidebarItem], **overrides: object) -> SidebarItem:
    update: dict[str, object] = {
        "children": tuple(children) or None,
        "status": None,
        "show_when_disabled": None,
    }
    update.update(overrides)
    return item.model_copy(update=update)


def build_sidebar_model(
    definition: NavigationDefinition,
    context: AppContext,
    user_context: UserContext,
    entitlements: Entitlements | None,
    locale: str,
    *,
    matcher: PermissionMatcher | None = None,
) -> SidebarModel:
    """Uncached entry point; callers may memoize per request on their side.

    ``context`` and ``locale`` do not influence the output. Labels keep their
    ``titleKey`` unresolved.
    """
    snapshot = user_context.permission_snapshot
    if snapshot.deny:
        log_json(
            logger,
            build_log_payload(
                "permission_snapshot_deny_ignored",
                user_id=user_context.user_id,
                deny_count=len(snapshot.deny),
            ),
            level=logging.WARNING,
        )

    builder = SidebarBuilder(snapshot, entitlements, matcher=matcher)
    model = SidebarModel(
        main=builder.build_sections(definition.main),
        footer=builder.build_sections(definition.footer),
    )

    log_json(
        logger,
        build_log_payload(
            "sidebar_model_built",
            org_id=context.active_org_id,
            branch_id=context.active_branch_id,
            locale=locale,
            has_entitlements=entitlements is not None,
            main_count=len(model.main),
            footer_count=len(model.footer),
            pruned=builder.pruned,
        ),
    )
    return model


def build_default_sidebar_model(
    context: AppContext,
    user_context: UserContext,
    entitlements: Entitlements | None,
    locale: str,
    *,
    matcher: PermissionMatcher | None = None,
) -> SidebarModel:
    return build_sidebar_model(
        get_sidebar_registry(),
        context,
        user_context,
        entitlements,
        locale,
        matcher=matcher,
    )
