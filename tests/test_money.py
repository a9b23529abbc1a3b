import pytest

from tddkit.money import Bank, Money, Pair, Sum, dollar, franc


def test_multiplication():
    five = dollar(2)
    assert five.times(5) == dollar(10)
    assert five.times(3) == dollar(6)


def test_equality():
    assert dollar(3) == dollar(3)
    assert dollar(4) != dollar(5)
    assert not (dollar(3) == franc(3))


def test_currency():
    assert dollar(1).currency == "USD"
    assert franc(1).currency == "CHF"


def test_simple_addition():
    total = dollar(3).plus(dollar(4))
    reduced = Bank().reduce(total, "USD")
    assert reduced == dollar(7)


def test_plus_returns_sum():
    total = dollar(3).plus(dollar(4))
    assert total == Sum(dollar(3), dollar(4))


def test_reduce_sum():
    total = Sum(dollar(4), dollar(6))
    assert Bank().reduce(total, "USD") == dollar(10)


def test_reduce_money():
    assert Bank().reduce(dollar(1), "USD") == dollar(1)


def test_reduce_money_different_currency():
    bank = Bank()
    bank.add_rate("CHF", "USD", 2)
    assert bank.reduce(franc(2), "USD") == dollar(1)


def test_identity_rate():
    assert Bank().rate("USD", "USD") == 1


def test_unknown_rate_is_zero():
    assert Bank().rate("CHF", "USD") == 0


def test_reduce_without_rate_fails():
    with pytest.raises(ZeroDivisionError):
        Bank().reduce(franc(2), "USD")


def test_mixed_addition():
    bank = Bank()
    bank.add_rate("CHF", "USD", 2)
    result = bank.reduce(dollar(5).plus(franc(10)), "USD")
    assert result == dollar(10)


def test_sum_plus_money():
    bank = Bank()
    bank.add_rate("CHF", "USD", 2)
    total = Sum(dollar(5), franc(10)).plus(dollar(5))
    assert bank.reduce(total, "USD") == dollar(15)


def test_sum_times():
    bank = Bank()
    bank.add_rate("CHF", "USD", 2)
    total = Sum(dollar(5), franc(10)).times(2)
    assert bank.reduce(total, "USD") == dollar(20)


def test_pair_equality():
    assert Pair("CHF", "USD") == Pair("CHF", "USD")
    assert Pair("CHF", "USD") != Pair("USD", "CHF")


def test_reduce_truncates_toward_zero():
    bank = Bank()
    bank.add_rate("CHF", "USD", 2)
    assert bank.reduce(Money(-3, "CHF"), "USD") == dollar(-1)