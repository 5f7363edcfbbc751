from .core.error_catalog import ErrorCatalog, ErrorDefinition, SidebarError
from .registry import get_sidebar_registry, validate_definition
from .schemas.entitlements import Entitlements
from .schemas.permissions import PermissionSnapshot
from .schemas.sidebar import (
    AppContext,
    ExactMatch,
    NavigationDefinition,
    PrefixMatch,
    SidebarItem,
    SidebarMatchRule,
    SidebarModel,
    SidebarSection,
    SidebarVisibilityRules,
    UserContext,
)
from .services.active_route import active_item_ids, is_item_active, is_prefix_match
from .services.permission_matcher import (
    AllowListCache,
    PermissionMatcher,
    check_permission,
    clear_permission_cache,
    satisfies,
)
from .services.sidebar_builder import (
    SidebarBuilder,
    build_default_sidebar_model,
    build_sidebar_model,
)
from .services.visibility import explain_visibility, is_visible

__all__ = [
    "AllowListCache",
    "AppContext",
    "Entitlements",
    "ErrorCatalog",
    "ErrorDefinition",
    "ExactMatch",
    "NavigationDefinition",
    "PermissionMatcher",
    "PermissionSnapshot",
    "PrefixMatch",
    "SidebarBuilder",
    "SidebarError",
    "SidebarItem",
    "SidebarMatchRule",
    "SidebarModel",
    "SidebarSection",
    "SidebarVisibilityRules",
    "UserContext",
    "active_item_ids",
    "build_default_sidebar_model",
    "build_sidebar_model",
    "check_permission",
    "clear_permission_cache",
    "explain_visibility",
    "get_sidebar_registry",
    "is_item_active",
    "is_prefix_match",
    "is_visible",
    "satisfies",
    "validate_definition",
]
