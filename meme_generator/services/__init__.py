"""Service layer modules (network and external I/O).

Currently includes image fetching/decoding helpers and the error taxonomy.
"""

__all__ = [
    "assets",
    "errors",
    "images",
]
