from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str


class ErrorCatalog:
    DUPLICATE_ITEM_ID = ErrorDefinition("DUPLICATE_ITEM_ID", "Sidebar item id is not unique")
    EMPTY_ITEM_ID = ErrorDefinition("EMPTY_ITEM_ID", "Sidebar item id is empty")
    EMPTY_ICON_KEY = ErrorDefinition("EMPTY_ICON_KEY", "Sidebar item icon key is empty")
    EMPTY_SLUG = ErrorDefinition(
        "EMPTY_SLUG",
        "Visibility rule contains an empty permission or module slug",
    )
    WILDCARD_REQUIRED_PERMISSION = ErrorDefinition(
        "WILDCARD_REQUIRED_PERMISSION",
        "Required permissions must not contain wildcards",
    )


class SidebarError(Exception):
    def __init__(self, error: ErrorDefinition, details: object | None = None):
        self.error = error
        self.details = details
        super().__init__(error.message)

    @property
    def code(self) -> str:
        return self.error.code

    def __str__(self) -> str:
        if self.details is None:
            return f"{self.error.code}: {self.error.message}"
        return f"{self.error.code}: {self.error.message} ({self.details})"
