import pytest
from pydantic import ValidationError

from domain.currency import ZERO, Currency
from domain.net_flow import NetAmount
from domain.wallet_status import WalletStatus


def test_wallet_status_from_daemon_payload() -> None:
    status = WalletStatus.model_validate(
        {
            "encrypted": True,
            "unlocked": True,
            "confirmedsiacoinbalance": "1500000000000000000000000000",
            "unconfirmedoutgoingsiacoins": "0",
            "unconfirmedincomingsiacoins": "250000000000000000000000",
            "siafundbalance": "12",
            "siacoinclaimbalance": "7",
        }
    )

    assert status.confirmed_siacoin_balance == Currency.siacoins(1500)
    assert status.siafund_balance == Currency(12)
    assert status.siacoin_claim_balance == Currency(7)
    assert status.unconfirmed_delta() == NetAmount(is_positive=True, magnitude=Currency.parse("0.25SC"))


def test_unconfirmed_delta_negative_when_spending() -> None:
    status = WalletStatus(
        unlocked=True,
        confirmed_siacoin_balance=Currency.siacoins(100),
        unconfirmed_outgoing_siacoins=Currency.siacoins(60),
        unconfirmed_incoming_siacoins=Currency.siacoins(15),
    )

    assert status.unconfirmed_delta() == NetAmount(is_positive=False, magnitude=Currency.siacoins(45))
    assert status.unconfirmed_balance() == NetAmount(is_positive=True, magnitude=Currency.siacoins(55))


def test_unconfirmed_balance_never_builds_negative_currency() -> None:
    status = WalletStatus(
        unlocked=True,
        confirmed_siacoin_balance=Currency.siacoins(1),
        unconfirmed_outgoing_siacoins=Currency.siacoins(3),
    )
    assert status.unconfirmed_balance() == NetAmount(is_positive=False, magnitude=Currency.siacoins(2))


def test_defaults_to_locked_empty_wallet() -> None:
    status = WalletStatus()
    assert not status.unlocked
    assert status.confirmed_siacoin_balance == ZERO
    assert status.unconfirmed_delta() == NetAmount.zero()


def test_rejects_negative_balance() -> None:
    with pytest.raises(ValidationError):
        WalletStatus.model_validate({"confirmedsiacoinbalance": "-5"})
