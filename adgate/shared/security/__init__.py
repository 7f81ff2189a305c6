"""Security middleware and the request signature check."""
