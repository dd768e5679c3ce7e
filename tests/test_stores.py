"""
Account and card store tests.
"""

import logging
from datetime import datetime
from decimal import Decimal
from itertools import chain, repeat

import pytest

from moza_backend.core.config import settings
from moza_backend.core.exceptions import NotFoundOrUnauthorized, PersistenceError
from moza_backend.core.logging_config import get_logger, setup_logging
from moza_backend.models import AccountType, BankAccount, Card, Currency
from moza_backend.services import accounts, cards, identifiers


# ==================== ACCOUNTS ====================

def test_create_account_defaults(db, make_user):
    user = make_user()

    account = accounts.create_account(db, user.id, AccountType.SAVINGS, Currency.EUR)

    assert account.id is not None
    assert account.user_id == user.id
    assert account.account_type == AccountType.SAVINGS
    assert account.currency == Currency.EUR
    assert account.balance == Decimal("0.00")
    assert account.is_active is True
    assert account.last_activity is not None
    assert len(account.account_number) == 9
    assert account.account_number.isdigit()


def test_list_accounts_only_returns_own(db, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    first = accounts.create_account(db, alice.id, AccountType.CHECKING, Currency.USD)
    second = accounts.create_account(db, alice.id, AccountType.BUSINESS, Currency.GBP)
    accounts.create_account(db, bob.id, AccountType.CHECKING, Currency.USD)

    owned = accounts.list_accounts_for_user(db, alice.id)

    assert [a.id for a in owned] == [first.id, second.id]


def test_account_number_collision_is_retried(db, make_user, monkeypatch):
    user = make_user()
    numbers = iter(["111111111", "111111111", "111111111", "222222222"])
    monkeypatch.setattr(identifiers, "generate_account_number", lambda: next(numbers))

    first = accounts.create_account(db, user.id, AccountType.CHECKING, Currency.USD)
    second = accounts.create_account(db, user.id, AccountType.CHECKING, Currency.USD)

    assert first.account_number == "111111111"
    assert second.account_number == "222222222"
    assert db.query(BankAccount).count() == 2


def test_account_number_retries_are_bounded(db, make_user, monkeypatch):
    user = make_user()
    calls = []

    def same_number():
        calls.append(1)
        return "333333333"

    monkeypatch.setattr(identifiers, "generate_account_number", same_number)
    accounts.create_account(db, user.id, AccountType.CHECKING, Currency.USD)
    calls.clear()

    with pytest.raises(PersistenceError):
        accounts.create_account(db, user.id, AccountType.CHECKING, Currency.USD)

    assert len(calls) == settings.IDENTIFIER_MAX_ATTEMPTS
    assert db.query(BankAccount).count() == 1


def test_get_owned_account_hides_foreign_accounts(db, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    account = accounts.create_account(db, bob.id, AccountType.CHECKING, Currency.USD)

    with pytest.raises(NotFoundOrUnauthorized) as foreign:
        accounts.get_owned_account(db, alice.id, account.id)
    with pytest.raises(NotFoundOrUnauthorized) as missing:
        accounts.get_owned_account(db, alice.id, 9999)

    assert foreign.value.message == missing.value.message


# ==================== CARDS ====================

def test_create_card(db, make_user):
    user = make_user()
    account = accounts.create_account(db, user.id, AccountType.CHECKING, Currency.USD)

    card = cards.create_card(db, user.id, account.id, "VISA", Decimal("500.00"))

    assert card.user_id == user.id
    assert card.bank_account_id == account.id
    assert card.card_type == "VISA"
    assert card.daily_limit == Decimal("500.00")
    assert card.is_active is True
    assert len(card.card_number) == 16 and card.card_number.isdigit()
    assert len(card.cvv) == 3 and card.cvv.isdigit()
    assert card.expiry_date.year == card.created_at.year + 4


def test_create_card_on_foreign_account(db, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    account = accounts.create_account(db, bob.id, AccountType.CHECKING, Currency.USD)

    with pytest.raises(NotFoundOrUnauthorized):
        cards.create_card(db, alice.id, account.id, "VISA", Decimal("100"))

    assert db.query(Card).count() == 0


def test_create_card_on_missing_account(db, make_user):
    user = make_user()

    with pytest.raises(NotFoundOrUnauthorized):
        cards.create_card(db, user.id, 9999, "VISA", Decimal("100"))


def test_card_number_collision_is_retried(db, make_user, monkeypatch):
    user = make_user()
    account = accounts.create_account(db, user.id, AccountType.CHECKING, Currency.USD)
    numbers = chain(["4000000000000001"] * 2, repeat("4000000000000002"))
    monkeypatch.setattr(identifiers, "generate_card_number", lambda: next(numbers))

    first = cards.create_card(db, user.id, account.id, "VISA", Decimal("100"))
    second = cards.create_card(db, user.id, account.id, "VISA", Decimal("100"))

    assert first.card_number == "4000000000000001"
    assert second.card_number == "4000000000000002"


def test_list_cards_for_account(db, make_user):
    user = make_user()
    account = accounts.create_account(db, user.id, AccountType.CHECKING, Currency.USD)
    other = accounts.create_account(db, user.id, AccountType.SAVINGS, Currency.USD)
    first = cards.create_card(db, user.id, account.id, "VISA", Decimal("100"))
    second = cards.create_card(db, user.id, account.id, "MASTERCARD", Decimal("200"))
    cards.create_card(db, user.id, other.id, "VISA", Decimal("100"))

    listed = cards.list_cards_for_account(db, user.id, account.id)

    assert [c.id for c in listed] == [first.id, second.id]


def test_list_cards_checks_ownership(db, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    account = accounts.create_account(db, bob.id, AccountType.CHECKING, Currency.USD)
    cards.create_card(db, bob.id, account.id, "VISA", Decimal("100"))

    with pytest.raises(NotFoundOrUnauthorized):
        cards.list_cards_for_account(db, alice.id, account.id)


# ==================== IDENTIFIERS ====================

def test_generated_identifier_formats():
    for _ in range(50):
        account_number = identifiers.generate_account_number()
        card_number = identifiers.generate_card_number()
        cvv = identifiers.generate_cvv()
        assert len(account_number) == 9 and account_number[0] != "0"
        assert len(card_number) == 16 and card_number[0] != "0"
        assert len(cvv) == 3 and cvv[0] != "0"


def test_transaction_reference_prefix():
    reference = identifiers.generate_transaction_reference()

    assert reference.startswith(settings.TRANSACTION_REFERENCE_PREFIX)
    assert reference[len(settings.TRANSACTION_REFERENCE_PREFIX):].isdigit()


def test_card_expiry_leap_day():
    assert identifiers.card_expiry(datetime(2024, 2, 29), 4) == datetime(2028, 2, 29)
    assert identifiers.card_expiry(datetime(2024, 2, 29), 1) == datetime(2025, 2, 28)
    assert identifiers.card_expiry(datetime(2023, 6, 15, 10, 30)) == datetime(2027, 6, 15, 10, 30)


# ==================== LOGGING ====================

def test_setup_logging_defaults_to_configured_level(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "debug")

    logger = setup_logging()

    assert logger.name == "moza_backend"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert setup_logging("warning").level == logging.WARNING
    assert get_logger("services.transfers").name == "moza_backend.services.transfers"

    setup_logging("info")
