"""
Shared module package.

Contains cross-cutting concerns used by every router:
- Error handling and mapping
- Request signature verification
- Security headers and rate limiting
- Logging configuration
"""
