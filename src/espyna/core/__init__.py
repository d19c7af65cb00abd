"""Core building blocks: exceptions and the request context."""
