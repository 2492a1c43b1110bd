"""
Service layer abstraction.

Each service encapsulates the CRUD contract for one entity type on top
of an injected ``EntityStore``.  Swapping the in-memory store for real
persistence only requires a different store, not new API handlers.
"""
