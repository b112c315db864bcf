from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from .currency import ZERO, Currency
from .transactions import FundType, ProcessedInput, ProcessedOutput, TransactionRecord

logger = logging.getLogger(__name__)

Entry = ProcessedInput | ProcessedOutput
OwnershipPredicate = Callable[[Entry], bool]


class UnrecognizedFundTypeError(ValueError):
    def __init__(self, *, fund_type: str, transaction_id: str) -> None:
        self.fund_type = fund_type
        self.transaction_id = transaction_id
        super().__init__(f"Unrecognized fund type {fund_type!r} in transaction {transaction_id}")


@dataclass(frozen=True)
class NetAmount:
    """Signed amount carried as a sign flag over a non-negative magnitude.

    Zero is reported as positive.
    """

    is_positive: bool
    magnitude: Currency

    @classmethod
    def between(cls, incoming: Currency, outgoing: Currency) -> NetAmount:
        if incoming.cmp(outgoing) >= 0:
            return cls(is_positive=True, magnitude=incoming - outgoing)
        return cls(is_positive=False, magnitude=outgoing - incoming)

    @classmethod
    def zero(cls) -> NetAmount:
        return cls(is_positive=True, magnitude=ZERO)

    def __add__(self, other: NetAmount) -> NetAmount:
        if not isinstance(other, NetAmount):
            return NotImplemented
        if self.is_positive == other.is_positive:
            return NetAmount(is_positive=self.is_positive, magnitude=self.magnitude + other.magnitude)
        positive, negative = (self, other) if self.is_positive else (other, self)
        return NetAmount.between(positive.magnitude, negative.magnitude)


@dataclass(frozen=True)
class NetFlow:
    transaction_id: str
    coins: NetAmount
    funds: NetAmount


def wallet_flag(entry: Entry) -> bool:
    return entry.wallet_address


def owned_by(addresses: Iterable[str]) -> OwnershipPredicate:
    """Ownership predicate matching entries whose related address is in ``addresses``."""
    owned = frozenset(addresses)

    def _is_owned(entry: Entry) -> bool:
        return entry.related_address is not None and entry.related_address in owned

    return _is_owned


def _fund_type(raw: str, transaction_id: str) -> FundType:
    try:
        return FundType(raw)
    except ValueError:
        raise UnrecognizedFundTypeError(fund_type=raw, transaction_id=transaction_id) from None


def net_flow(txn: TransactionRecord, is_wallet_address: OwnershipPredicate | None = None) -> NetFlow:
    """Net siacoin and siafund change a transaction causes for the wallet.

    Wallet-owned inputs count as outgoing, wallet-owned outputs as incoming.
    Miner payouts are always incoming. Miner fees have no entry and so are not
    counted on either side.
    """
    owns = is_wallet_address or wallet_flag

    outgoing_coins = ZERO
    outgoing_funds = ZERO
    for entry in txn.inputs:
        fund_type = _fund_type(entry.fund_type, txn.transaction_id)
        if fund_type not in (FundType.SIACOIN_INPUT, FundType.SIAFUND_INPUT):
            raise UnrecognizedFundTypeError(fund_type=entry.fund_type, transaction_id=txn.transaction_id)
        if not owns(entry):
            logger.debug("Skipping foreign %s in %s", fund_type, txn.transaction_id)
            continue
        if fund_type is FundType.SIACOIN_INPUT:
            outgoing_coins += entry.value
        else:
            outgoing_funds += entry.value

    incoming_coins = ZERO
    incoming_funds = ZERO
    for output in txn.outputs:
        fund_type = _fund_type(output.fund_type, txn.transaction_id)
        if fund_type is FundType.MINER_PAYOUT:
            incoming_coins += output.value
            continue
        if fund_type not in (FundType.SIACOIN_OUTPUT, FundType.SIAFUND_OUTPUT):
            raise UnrecognizedFundTypeError(fund_type=output.fund_type, transaction_id=txn.transaction_id)
        if not owns(output):
            logger.debug("Skipping foreign %s in %s", fund_type, txn.transaction_id)
            continue
        if fund_type is FundType.SIACOIN_OUTPUT:
            incoming_coins += output.value
        else:
            incoming_funds += output.value

    return NetFlow(
        transaction_id=txn.transaction_id,
        coins=NetAmount.between(incoming_coins, outgoing_coins),
        funds=NetAmount.between(incoming_funds, outgoing_funds),
    )


def total_net_flow(
    transactions: Iterable[TransactionRecord],
    is_wallet_address: OwnershipPredicate | None = None,
) -> tuple[NetAmount, NetAmount]:
    """Sum of per-transaction coin and fund flows."""
    coins = NetAmount.zero()
    funds = NetAmount.zero()
    for txn in transactions:
        flow = net_flow(txn, is_wallet_address)
        coins += flow.coins
        funds += flow.funds
    return coins, funds


__all__ = [
    "NetAmount",
    "NetFlow",
    "OwnershipPredicate",
    "UnrecognizedFundTypeError",
    "net_flow",
    "owned_by",
    "total_net_flow",
    "wallet_flag",
]
