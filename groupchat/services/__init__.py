"""Services — the imperative shell around the pure core.

Invariants:
    - Services are stateless with respect to request data
    - Every read/write goes through the ChatStore contract
"""
