"""Contract validation (required-field checks run at construction time)."""

from dualcontract.validation.validator import validate

__all__ = ["validate"]
