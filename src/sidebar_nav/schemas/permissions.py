from pydantic import BaseModel, ConfigDict, Field


class PermissionSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    allow: frozenset[str] = Field(
        default_factory=frozenset,
        description="Compiled effective permissions. Entries ending in `.*` grant the prefix and everything below it.",
    )
    deny: frozenset[str] = Field(
        default_factory=frozenset,
        description="Kept for backwards compatibility. Always empty for compiled snapshots and never consulted.",
    )
