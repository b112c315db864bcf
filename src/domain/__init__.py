"""Domain types for the wallet accounting core.

``currency`` and ``units`` hold the exact hasting arithmetic, ``transactions``
the typed daemon records, and ``net_flow`` the per-transaction balance
attribution built on top of them.
"""

__all__ = [
    "currency",
    "net_flow",
    "transactions",
    "units",
    "wallet_status",
]
