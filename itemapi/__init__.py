"""
Item API: generic CRUD backend for "item" resources.

Application package root. This is a small monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - items: list/get/create/update/delete of generic items.

Layers:
    - domain: Error taxonomy, rule evaluator, entities, ports.
    - application: Use cases returning Result values, DTOs.
    - infrastructure: SQLAlchemy adapter implementing the item port.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
    - core: Settings.
"""
