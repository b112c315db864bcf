"""Typed transaction records as returned by the wallet daemon.

Records are validated from already-decoded daemon results. Currency values
arrive as decimal strings of hastings. Fund-type tags are kept as the raw
strings the daemon sends so that unknown tags reach the flow analyzer and are
reported there instead of being dropped at the boundary.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator, field_validator

from .currency import Currency

# Unconfirmed records carry a height far beyond any real block height.
UNCONFIRMED_HEIGHT_THRESHOLD = 10**9
UNCONFIRMED_LABEL = "unconfirmed"


class FundType(StrEnum):
    SIACOIN_INPUT = "siacoin input"
    SIAFUND_INPUT = "siafund input"
    SIACOIN_OUTPUT = "siacoin output"
    SIAFUND_OUTPUT = "siafund output"
    MINER_PAYOUT = "miner payout"


def _coerce_currency(value: Any) -> Currency:
    if isinstance(value, Currency):
        return value
    if isinstance(value, bool):
        raise ValueError("currency value must be a number of hastings")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("currency value must be >= 0")
        return Currency(value)
    if isinstance(value, str):
        if not value.isascii() or not value.isdigit():
            raise ValueError("currency value must be a decimal string of hastings")
        return Currency(int(value))
    raise ValueError("currency value must be a number of hastings")


CurrencyValue = Annotated[
    Currency,
    PlainValidator(_coerce_currency),
    PlainSerializer(str, return_type=str),
]


def is_confirmed_height(height: int) -> bool:
    return height < UNCONFIRMED_HEIGHT_THRESHOLD


def format_confirmation_height(height: int) -> str:
    return str(height) if is_confirmed_height(height) else UNCONFIRMED_LABEL


class _DaemonModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ProcessedInput(_DaemonModel):
    fund_type: str = Field(alias="fundtype")
    wallet_address: bool = Field(default=False, alias="walletaddress")
    related_address: str | None = Field(default=None, alias="relatedaddress")
    value: CurrencyValue


class ProcessedOutput(_DaemonModel):
    """A transaction output.

    Miner payouts have no owning address; ``wallet_address`` is meaningless
    for them and the analyzer ignores it.
    """

    fund_type: str = Field(alias="fundtype")
    maturity_height: int = Field(default=0, alias="maturityheight", ge=0)
    wallet_address: bool = Field(default=False, alias="walletaddress")
    related_address: str | None = Field(default=None, alias="relatedaddress")
    value: CurrencyValue


class TransactionRecord(_DaemonModel):
    transaction_id: str = Field(alias="transactionid")
    confirmation_height: int = Field(alias="confirmationheight", ge=0)
    confirmation_timestamp: int = Field(default=0, alias="confirmationtimestamp", ge=0)
    inputs: list[ProcessedInput] = Field(default_factory=list)
    outputs: list[ProcessedOutput] = Field(default_factory=list)

    @field_validator("inputs", "outputs", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # The daemon encodes empty lists as null.
        return [] if value is None else value

    @field_validator("transaction_id")
    @classmethod
    def _validate_transaction_id(cls, value: str) -> str:
        if not value:
            raise ValueError("transaction_id must be non-empty")
        return value

    @property
    def is_confirmed(self) -> bool:
        return is_confirmed_height(self.confirmation_height)

    @property
    def height_label(self) -> str:
        return format_confirmation_height(self.confirmation_height)


class WalletTransactions(_DaemonModel):
    confirmed_transactions: list[TransactionRecord] = Field(default_factory=list, alias="confirmedtransactions")
    unconfirmed_transactions: list[TransactionRecord] = Field(default_factory=list, alias="unconfirmedtransactions")

    @field_validator("confirmed_transactions", "unconfirmed_transactions", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def history(self) -> list[TransactionRecord]:
        """Confirmed history followed by the unconfirmed pool."""
        return [*self.confirmed_transactions, *self.unconfirmed_transactions]


__all__ = [
    "UNCONFIRMED_HEIGHT_THRESHOLD",
    "UNCONFIRMED_LABEL",
    "CurrencyValue",
    "FundType",
    "ProcessedInput",
    "ProcessedOutput",
    "TransactionRecord",
    "WalletTransactions",
    "format_confirmation_height",
    "is_confirmed_height",
]
