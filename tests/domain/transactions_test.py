import pytest
from pydantic import ValidationError

from domain.currency import Currency
from domain.transactions import (
    UNCONFIRMED_HEIGHT_THRESHOLD,
    FundType,
    TransactionRecord,
    WalletTransactions,
    format_confirmation_height,
    is_confirmed_height,
)
from tests.constants import WALLET_ADDRESS
from tests.helpers.records import make_transaction


def _daemon_transaction(txid: str, height: int) -> dict[str, object]:
    return {
        "transactionid": txid,
        "confirmationheight": height,
        "confirmationtimestamp": 1_500_000_000,
        "inputs": [
            {
                "fundtype": "siacoin input",
                "walletaddress": True,
                "relatedaddress": WALLET_ADDRESS,
                "value": "500000000000000000000000000",
            }
        ],
        "outputs": [
            {
                "fundtype": "miner payout",
                "maturityheight": 144,
                "walletaddress": False,
                "value": "10000000000000000000000000",
            }
        ],
    }


def test_record_validates_daemon_payload() -> None:
    txn = TransactionRecord.model_validate(_daemon_transaction("ab" * 32, 1234))

    assert txn.transaction_id == "ab" * 32
    assert txn.confirmation_height == 1234
    assert txn.inputs[0].fund_type == FundType.SIACOIN_INPUT
    assert txn.inputs[0].wallet_address
    assert txn.inputs[0].related_address == WALLET_ADDRESS
    assert txn.inputs[0].value == Currency.siacoins(500)
    assert txn.outputs[0].value == Currency.siacoins(10)
    assert txn.outputs[0].maturity_height == 144


def test_record_accepts_null_entry_lists() -> None:
    txn = TransactionRecord.model_validate(
        {"transactionid": "x", "confirmationheight": 1, "inputs": None, "outputs": None}
    )
    assert txn.inputs == []
    assert txn.outputs == []


def test_record_keeps_unknown_fund_types_for_the_analyzer() -> None:
    payload = _daemon_transaction("cd" * 32, 5)
    payload["outputs"] = [{"fundtype": "claim output", "value": "1"}]  # type: ignore[index]
    txn = TransactionRecord.model_validate(payload)
    assert txn.outputs[0].fund_type == "claim output"


@pytest.mark.parametrize("value", ["-1", "1.5", "1e3", "", "abc", -3, 1.5, True])
def test_record_rejects_malformed_currency(value: object) -> None:
    payload = _daemon_transaction("ef" * 32, 5)
    payload["inputs"][0]["value"] = value  # type: ignore[index]
    with pytest.raises(ValidationError):
        TransactionRecord.model_validate(payload)


def test_record_rejects_empty_transaction_id() -> None:
    with pytest.raises(ValidationError):
        TransactionRecord.model_validate({"transactionid": "", "confirmationheight": 1})


def test_currency_values_serialize_as_hasting_strings() -> None:
    txn = TransactionRecord.model_validate(_daemon_transaction("ab" * 32, 1234))
    dumped = txn.model_dump(by_alias=True)
    assert dumped["inputs"][0]["value"] == "500000000000000000000000000"
    assert TransactionRecord.model_validate(dumped) == txn


def test_confirmation_threshold() -> None:
    assert UNCONFIRMED_HEIGHT_THRESHOLD == 10**9
    assert is_confirmed_height(0)
    assert is_confirmed_height(10**9 - 1)
    assert not is_confirmed_height(10**9)
    assert not is_confirmed_height(2**64 - 1)


def test_height_label() -> None:
    assert format_confirmation_height(0) == "0"
    assert format_confirmation_height(10**9 - 1) == "999999999"
    assert format_confirmation_height(10**9) == "unconfirmed"

    assert make_transaction(height=42).height_label == "42"
    pending = make_transaction(height=2**64 - 1)
    assert not pending.is_confirmed
    assert pending.height_label == "unconfirmed"


def test_wallet_transactions_history_lists_confirmed_first() -> None:
    listing = WalletTransactions.model_validate(
        {
            "confirmedtransactions": [_daemon_transaction("01" * 32, 10), _daemon_transaction("02" * 32, 11)],
            "unconfirmedtransactions": [_daemon_transaction("03" * 32, 2**64 - 1)],
        }
    )
    assert [txn.transaction_id for txn in listing.history()] == ["01" * 32, "02" * 32, "03" * 32]

    empty = WalletTransactions.model_validate({"confirmedtransactions": None, "unconfirmedtransactions": None})
    assert empty.history() == []
