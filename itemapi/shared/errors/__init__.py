"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that every failure is
classified once and rendered in the same envelope.
"""
