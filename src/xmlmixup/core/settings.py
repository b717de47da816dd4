"""
Runtime settings for the markup compiler.

Settings are passed explicitly to the compiler, the module level helpers and
the mixin. There is no global configuration.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from xmlmixup.exceptions.core import ErrorLevel


class MixupSettings(BaseModel):
    """Validated, immutable compiler configuration."""

    model_config = ConfigDict(frozen=True)

    marker: str = Field(
        default="#",
        description="Leading character that identifies special keys in structural maps",
    )
    xml_version: str = Field(
        default="1.0",
        description="XML version recorded on documents created by the compiler",
    )
    max_depth: int | None = Field(
        default=None,
        ge=1,
        description="Maximum spec nesting depth; unbounded when None",
    )
    error_level: ErrorLevel = Field(
        default=ErrorLevel.USER,
        description="Detail level of locations in error messages",
    )

    @field_validator("marker")
    @classmethod
    def _single_symbol(cls, value: str) -> str:
        if len(value) != 1 or value.isalnum() or value.isspace():
            raise ValueError("marker must be a single non-alphanumeric character")
        return value

    def marker_key(self, key: object) -> bool:
        """Check whether a map key is a special (marker) key."""
        return isinstance(key, str) and key.startswith(self.marker)


DEFAULT_SETTINGS = MixupSettings()
