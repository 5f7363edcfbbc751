from __future__ import annotations

import pytest

from sidebar_nav.constants.modules import (
    MODULE_HOME,
    MODULE_ORGANIZATION_MANAGEMENT,
    MODULE_SUPPORT,
    MODULE_WAREHOUSE,
)
from sidebar_nav.schemas.entitlements import Entitlements
from sidebar_nav.schemas.sidebar import AppContext
from sidebar_nav.services.permission_matcher import clear_permission_cache


@pytest.fixture(autouse=True)
def _reset_permission_cache():
    clear_permission_cache()
    yield
    clear_permission_cache()


@pytest.fixture()
def app_context() -> AppContext:
    return AppContext(active_org_id="org-123", active_branch_id="branch-456")


@pytest.fixture()
def free_entitlements() -> Entitlements:
    return Entitlements(
        organization_id="org-123",
        plan_id="plan-free",
        plan_name="free",
        enabled_modules=[MODULE_HOME, MODULE_WAREHOUSE, MODULE_ORGANIZATION_MANAGEMENT, MODULE_SUPPORT],
        updated_at="2026-02-13T10:00:00.000Z",
    )
