from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sidebar_nav.schemas.permissions import PermissionSnapshot


DisabledReason = Literal["permission", "entitlement", "coming_soon"]
ItemStatus = Literal["coming_soon"]

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SidebarVisibilityRules(BaseModel):
    model_config = _CAMEL_CONFIG

    requires_permissions: tuple[str, ...] | None = Field(
        default=None, description="Every permission must be granted (AND)."
    )
    requires_any_permissions: tuple[str, ...] | None = Field(
        default=None, description="At least one permission must be granted (OR)."
    )
    requires_modules: tuple[str, ...] | None = Field(
        default=None, description="Every module must be enabled by the subscription (AND)."
    )
    requires_any_modules: tuple[str, ...] | None = Field(
        default=None, description="At least one module must be enabled by the subscription (OR)."
    )


class ExactMatch(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    exact: str


class PrefixMatch(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True
    )

    starts_with: str


SidebarMatchRule = ExactMatch | PrefixMatch


class SidebarItem(BaseModel):
    model_config = _CAMEL_CONFIG

    id: str
    title: str
    title_key: str | None = None
    icon_key: str
    href: str | None = None
    children: tuple[SidebarItem, ...] | None = None
    match: SidebarMatchRule | None = None
    visibility: SidebarVisibilityRules | None = None
    disabled_reason: DisabledReason | None = None
    badge: str | int | None = None
    # Registry-only knobs, never present in a compiled model.
    status: ItemStatus | None = None
    show_when_disabled: bool | None = None

    @property
    def has_children(self) -> bool:
        return bool(self.children)


class SidebarSection(BaseModel):
    """Top-level block of the static definition gated by a single module."""

    model_config = _CAMEL_CONFIG

    module: str | None = None
    items: tuple[SidebarItem, ...] = ()


class NavigationDefinition(BaseModel):
    model_config = _CAMEL_CONFIG

    main: tuple[SidebarSection, ...] = ()
    footer: tuple[SidebarSection, ...] = ()

    def iter_items(self):
        for section in (*self.main, *self.footer):
            yield from section.items


class SidebarModel(BaseModel):
    model_config = _CAMEL_CONFIG

    main: tuple[SidebarItem, ...] = ()
    footer: tuple[SidebarItem, ...] = ()

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class AppContext(BaseModel):
    model_config = _CAMEL_CONFIG

    active_org_id: str | None = None
    active_branch_id: str | None = None
    user_modules: tuple[str, ...] = ()


class UserContext(BaseModel):
    model_config = _CAMEL_CONFIG

    permission_snapshot: PermissionSnapshot = Field(default_factory=PermissionSnapshot)
    user_id: str | None = None
