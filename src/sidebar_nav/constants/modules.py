"""Module slugs as they appear in ``Entitlements.enabled_modules``."""

MODULE_HOME = "home"
MODULE_WAREHOUSE = "warehouse"
MODULE_TEAMS = "teams"
MODULE_ORGANIZATION_MANAGEMENT = "organization-management"
MODULE_ANALYTICS = "analytics"
MODULE_SUPPORT = "support"

ALL_MODULES: tuple[str, ...] = (
    MODULE_HOME,
    MODULE_WAREHOUSE,
    MODULE_TEAMS,
    MODULE_ORGANIZATION_MANAGEMENT,
    MODULE_ANALYTICS,
    MODULE_SUPPORT,
)
