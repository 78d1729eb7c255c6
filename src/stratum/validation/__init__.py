from stratum.validation.validator import ValidationError, validate, validate_or_raise

__all__ = ["ValidationError", "validate", "validate_or_raise"]
