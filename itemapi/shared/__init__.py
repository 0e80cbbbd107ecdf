"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error classification and envelope rendering
- Security middleware
- Rate limiting
- Request logging
- Logging configuration
"""
