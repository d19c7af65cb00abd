"""List request utilities."""

from .validation import ListRequestValidationRules, is_valid_field

__all__ = ["ListRequestValidationRules", "is_valid_field"]
