"""Custom exceptions for configuration management."""

from typing import List, Optional

from pydantic import ValidationError


class ConfigurationError(Exception):
    """
    Exception raised when configuration loading or validation fails.

    Carries a list of specific validation errors and a list of suggestions,
    both rendered into the exception message.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Primary error message
            errors: List of specific validation errors
            suggestions: List of helpful suggestions to fix the errors
        """
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message]

        if self.errors:
            parts.append("\nValidation Errors:")
            parts.extend(f"  {i}. {error}" for i, error in enumerate(self.errors, 1))

        if self.suggestions:
            parts.append("\nSuggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "ConfigurationError":
        """Convert a pydantic ValidationError into a readable ConfigurationError."""
        messages = []
        for item in error.errors():
            field_path = " -> ".join(str(loc) for loc in item["loc"]) or "config"
            error_type = item["type"]

            if error_type == "missing":
                messages.append(f"Missing required field: {field_path}")
            elif error_type.endswith("_type") or error_type.endswith("_parsing"):
                messages.append(
                    f"Invalid type for '{field_path}': {item['msg']} (got {item.get('input')!r})"
                )
            elif "enum" in error_type:
                messages.append(f"Invalid value for '{field_path}': {item['msg']}")
            else:
                messages.append(f"{field_path}: {item['msg']}")

        return cls(
            "Configuration validation failed",
            errors=messages,
            suggestions=[
                "Review config.example.yaml for correct format",
                "Verify field types match the expected schema",
            ],
        )
