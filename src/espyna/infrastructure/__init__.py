"""Secondary adapters."""
