"""
Configuration-related exceptions for the WCAG server.

Raised while reading ``wcag.config.json`` or applying ``WCAG_*`` environment
overrides. Messages name the offending file or variable and list fixes.
"""

from typing import Optional, Sequence


class ConfigurationError(Exception):
    """Base exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        suggestions: Optional[Sequence[str]] = None,
        config_key: Optional[str] = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error description
            config_file: Configuration file that caused the error
            suggestions: Suggested fixes, shown numbered
            config_key: Dotted configuration key involved (e.g. ``logging.level``)
        """
        super().__init__(message)
        self.config_file = config_file
        self.config_key = config_key
        self.suggestions = list(suggestions or [])

    def __str__(self) -> str:
        lines = [super().__str__()]
        if self.config_file:
            lines.append(f"Config file: {self.config_file}")
        if self.config_key:
            lines.append(f"Setting: {self.config_key}")
        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            lines.extend(f"  {i}. {s}" for i, s in enumerate(self.suggestions, 1))
        return "\n".join(lines)


class EnvironmentVariableError(ConfigurationError):
    """Raised when a ``WCAG_*`` environment variable holds an unusable value."""

    def __init__(
        self,
        message: str,
        variable_name: Optional[str] = None,
        value: Optional[str] = None,
        allowed: Sequence[str] = (),
        config_key: Optional[str] = None,
    ) -> None:
        suggestions = []
        if variable_name and allowed:
            suggestions.append(f"Set {variable_name} to one of: {', '.join(allowed)}")
        elif variable_name:
            suggestions.append(f"Check the value of the {variable_name} environment variable")
        if variable_name:
            suggestions.append(f"Unset {variable_name} to use the configured default")

        super().__init__(message, suggestions=suggestions, config_key=config_key)
        self.variable_name = variable_name
        self.value = value
        self.allowed = tuple(allowed)
