"""Validation of raw (offset, limit, total) configurations.

An offset at or past the end of the list is rejected. The one exception is the
empty list (total == 0, offset == 0), which paginates as a single empty page.
"""
import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from pagewindow.utils.errors import InvalidConfiguration, describe_validation_error

logger = logging.getLogger(__name__)


def ensure_number(v: Any) -> Any:
    """Reject values pydantic's lax int mode would otherwise coerce."""
    # bool is an int subclass; strings would be parsed.
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError("must be a number")
    return v


class PaginationConfig(BaseModel):
    """A validated pagination configuration."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    offset: int = Field(..., ge=0, description="Zero-based position in the list")
    limit: int = Field(..., ge=1, description="Number of items per page")
    total: int = Field(..., ge=0, description="Total number of items in the list")

    @field_validator("offset", "limit", "total", mode="before")
    @classmethod
    def require_number(cls, v: Any) -> Any:
        return ensure_number(v)

    @model_validator(mode="after")
    def offset_within_total(self) -> "PaginationConfig":
        if self.offset >= self.total and not (self.total == 0 and self.offset == 0):
            raise ValueError(
                f"offset {self.offset} is past the end of {self.total} item(s)"
            )
        return self


def check_config(config: Any) -> PaginationConfig:
    """Validate a raw configuration, raising InvalidConfiguration on failure."""
    if isinstance(config, PaginationConfig):
        return config
    if not isinstance(config, Mapping):
        raise InvalidConfiguration(
            [f"config must be a mapping, got {type(config).__name__}"]
        )
    try:
        return PaginationConfig.model_validate(dict(config))
    except ValidationError as e:
        raise InvalidConfiguration(describe_validation_error(e)) from e


def validate_config(config: Any) -> Optional[PaginationConfig]:
    """Return the validated configuration, or None if it is invalid."""
    try:
        return check_config(config)
    except InvalidConfiguration as e:
        logger.debug(f"Rejected pagination config {config!r}: {e}")
        return None
