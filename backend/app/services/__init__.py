"""Services Layer — request handling between the HTTP routes and the record store.

Invariants:
    - Services never construct their own store: it is passed in by the route
    - Errors are raised as SiteListError subclasses, never turned into responses here

Design Decisions:
    - Method dispatch as plain branching: two verbs do not warrant a table
"""
