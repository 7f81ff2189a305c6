"""Directory bounded context."""
