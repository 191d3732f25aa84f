"""
Error types for theme building and style resolution.
"""


class ThemeError(Exception):
    """Base exception for all theme errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicateToken(ThemeError):
    """
    Raised when two token definitions share a name.

    Only happens while building a TokenTable, so it always points at a
    defect in the static theme definitions.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate semantic token: {name!r}")


class UnknownToken(ThemeError):
    """Raised when a token reference is not present in the token table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown semantic token: {name!r}")


class UnknownVariant(ThemeError):
    """Raised when a variant is not registered for a component."""

    def __init__(self, component: str, variant: str):
        self.component = component
        self.variant = variant
        super().__init__(f"Unknown variant {variant!r} for component {component!r}")


class UnknownComponent(ThemeError):
    """Raised when a component has no registered style."""

    def __init__(self, component: str):
        self.component = component
        super().__init__(f"Unknown component: {component!r}")


class DuplicateComponent(ThemeError):
    """Raised when two component styles share a name."""

    def __init__(self, component: str):
        self.component = component
        super().__init__(f"Duplicate component style: {component!r}")


class ThemeFileError(ThemeError):
    """
    Raised when a YAML theme file cannot be loaded.

    Examples:
    - File does not exist
    - Invalid YAML syntax
    - Entries that fail model validation
    """

    pass


class ConfigError(ThemeError):
    """Raised when backpack-theme.toml is malformed."""

    pass
