"""Cross-Origin Headers — the allow-all header sent on every sites response.

Invariants:
    - Success and error responses carry the same header
"""

ALLOW_ALL_ORIGINS = {"Access-Control-Allow-Origin": "*"}
