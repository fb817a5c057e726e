"""
Persistence adapters.

Everything is a flat JSON file on local disk: the likes ledger (read/write)
and the catalog documents the static site ships (read only).
"""
