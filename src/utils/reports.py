from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from domain.net_flow import OwnershipPredicate, net_flow
from domain.transactions import TransactionRecord
from domain.wallet_status import WalletStatus

from .formatting import format_net_amount, format_units

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionRow:
    height: str
    transaction_id: str
    net_siacoins: str
    net_siafunds: str


def build_transaction_rows(
    transactions: Iterable[TransactionRecord],
    is_wallet_address: OwnershipPredicate | None = None,
    *,
    significant_digits: int | None = None,
) -> list[TransactionRow]:
    rows: list[TransactionRow] = []
    for txn in transactions:
        flow = net_flow(txn, is_wallet_address)
        rows.append(
            TransactionRow(
                height=txn.height_label,
                transaction_id=txn.transaction_id,
                net_siacoins=format_net_amount(
                    flow.coins,
                    lambda value: format_units(value, significant_digits),
                ),
                net_siafunds=format_net_amount(flow.funds, str),
            )
        )
    logger.info("Built %d transaction rows", len(rows))
    return rows


def render_transactions(
    transactions: Iterable[TransactionRecord],
    is_wallet_address: OwnershipPredicate | None = None,
) -> None:
    rows = build_transaction_rows(transactions, is_wallet_address)
    print("Transactions:")
    if not rows:
        print("  (none)")
        return

    height_label = "Height"
    id_label = "Transaction ID"
    coins_label = "Net siacoins"
    funds_label = "Net siafunds"

    height_width = max(len(height_label), max(len(row.height) for row in rows))
    id_width = max(len(id_label), max(len(row.transaction_id) for row in rows))
    coins_width = max(len(coins_label), max(len(row.net_siacoins) for row in rows))
    funds_width = max(len(funds_label), max(len(row.net_siafunds) for row in rows) + len(" SF"))

    header = (
        f"{height_label:>{height_width}} "
        f"{id_label:>{id_width}} "
        f"{coins_label:>{coins_width}} "
        f"{funds_label:>{funds_width}}"
    )
    lines = [header, "-" * len(header)]
    for row in rows:
        lines.append(
            f"{row.height:>{height_width}} "
            f"{row.transaction_id:>{id_width}} "
            f"{row.net_siacoins:>{coins_width}} "
            f"{row.net_siafunds + ' SF':>{funds_width}}"
        )
    print("\n".join(lines))


def render_wallet_status(status: WalletStatus) -> None:
    encryption = "Encrypted" if status.encrypted else "Unencrypted"
    print("Wallet status:")
    if not status.unlocked:
        print(f"{encryption}, Locked")
        print("Unlock the wallet to view balance")
        return

    rows = [
        ("Confirmed Balance:", format_units(status.confirmed_siacoin_balance)),
        ("Unconfirmed Delta:", format_net_amount(status.unconfirmed_delta())),
        ("Exact:", f"{status.confirmed_siacoin_balance} H"),
        ("Siafunds:", f"{status.siafund_balance} SF"),
        ("Siafund Claims:", f"{status.siacoin_claim_balance} H"),
    ]
    label_width = max(len(label) for label, _ in rows)
    print(f"{encryption}, Unlocked")
    print("\n".join(f"{label:<{label_width}} {value}" for label, value in rows))


__all__ = ["TransactionRow", "build_transaction_rows", "render_transactions", "render_wallet_status"]
