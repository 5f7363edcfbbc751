from pydantic import BaseModel, ConfigDict, Field


class Entitlements(BaseModel):
    """Organization subscription facts as supplied by the subscription service.

    ``None`` in place of an instance means there is no usable subscription and
    every module check fails.
    """

    model_config = ConfigDict(frozen=True)

    enabled_modules: frozenset[str] = Field(default_factory=frozenset)
    enabled_contexts: frozenset[str] = Field(default_factory=frozenset)
    features: dict[str, bool | int | float | str] = Field(default_factory=dict)
    limits: dict[str, int | float] = Field(default_factory=dict)
    organization_id: str | None = None
    plan_id: str | None = None
    plan_name: str | None = None
    updated_at: str | None = None

    def has_module(self, module: str) -> bool:
        return module in self.enabled_modules
