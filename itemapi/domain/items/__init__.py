"""
Items bounded context: domain layer.

Entities, the repository port and the validation rule sets
for generic items.
"""
