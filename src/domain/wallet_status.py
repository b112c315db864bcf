from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .currency import ZERO
from .net_flow import NetAmount
from .transactions import CurrencyValue


class WalletStatus(BaseModel):
    """Wallet balance snapshot reported by the daemon."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    encrypted: bool = False
    unlocked: bool = False
    confirmed_siacoin_balance: CurrencyValue = Field(default=ZERO, alias="confirmedsiacoinbalance")
    unconfirmed_outgoing_siacoins: CurrencyValue = Field(default=ZERO, alias="unconfirmedoutgoingsiacoins")
    unconfirmed_incoming_siacoins: CurrencyValue = Field(default=ZERO, alias="unconfirmedincomingsiacoins")
    siafund_balance: CurrencyValue = Field(default=ZERO, alias="siafundbalance")
    siacoin_claim_balance: CurrencyValue = Field(default=ZERO, alias="siacoinclaimbalance")

    def unconfirmed_delta(self) -> NetAmount:
        return NetAmount.between(self.unconfirmed_incoming_siacoins, self.unconfirmed_outgoing_siacoins)

    def unconfirmed_balance(self) -> NetAmount:
        """Confirmed balance with the unconfirmed delta applied."""
        return NetAmount.between(
            self.confirmed_siacoin_balance + self.unconfirmed_incoming_siacoins,
            self.unconfirmed_outgoing_siacoins,
        )


__all__ = ["WalletStatus"]
