"""
Application layer for the items bounded context.

Use cases coordinate validation and the item repository port.
No framework or infrastructure imports allowed.
"""
