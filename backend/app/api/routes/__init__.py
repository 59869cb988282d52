"""Route Modules — one file per resource/concern.

Invariants:
    - Each module exposes an APIRouter (or a function building one)
    - Routes never contain business logic (delegate to services)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
