"""Infrastructure Layer — database access, the record store, and logging.

Invariants:
    - Driver exceptions are mapped to core/errors.py types before leaving this layer
    - Stores receive their session and ancestor scope by injection

Design Decisions:
    - No retries or timeouts around store calls: failures surface immediately
"""
