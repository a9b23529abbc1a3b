"""Multi-currency money arithmetic with a bank that converts between currencies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class Expression(ABC):
    """A monetary expression that a bank can reduce to a single currency."""

    @abstractmethod
    def plus(self, addend: Expression) -> Expression:
        """Return an expression adding ``addend`` to this one."""

    @abstractmethod
    def reduce(self, bank: Bank, to: str) -> Money:
        """Convert this expression to money in currency ``to``."""

    @abstractmethod
    def times(self, multiplier: int) -> Expression:
        """Return this expression multiplied by ``multiplier``."""


@dataclass(frozen=True)
class Money(Expression):
    """An amount in a single currency."""

    amount: int
    currency: str

    def reduce(self, bank: Bank, to: str) -> Money:
        rate = bank.rate(self.currency, to)
        return Money(_truncating_div(self.amount, rate), to)

    def plus(self, addend: Expression) -> Expression:
        return Sum(self, addend)

    def times(self, multiplier: int) -> Expression:
        return Money(self.amount * multiplier, self.currency)


def dollar(amount: int) -> Money:
    """Return ``amount`` US dollars."""
    return Money(amount, "USD")


def franc(amount: int) -> Money:
    """Return ``amount`` Swiss francs."""
    return Money(amount, "CHF")


@dataclass(frozen=True)
class Pair:
    """A currency conversion direction."""

    source: str
    to: str


@dataclass(frozen=True)
class Sum(Expression):
    """The sum of two expressions, possibly in different currencies."""

    augend: Expression
    addend: Expression

    def reduce(self, bank: Bank, to: str) -> Money:
        amount = self.augend.reduce(bank, to).amount + self.addend.reduce(bank, to).amount
        return Money(amount, to)

    def plus(self, addend: Expression) -> Expression:
        return Sum(self, addend)

    def times(self, multiplier: int) -> Expression:
        scaled = self.addend.times(multiplier)
        return Sum(scaled, self.addend.times(multiplier))


@dataclass
class Bank:
    """Holds exchange rates and reduces expressions to a currency."""

    _rates: dict[Pair, int] = field(default_factory=dict)

    def reduce(self, source: Expression, to: str) -> Money:
        """Reduce ``source`` to money in currency ``to``."""
        return source.reduce(self, to)

    def add_rate(self, source: str, to: str, rate: int) -> None:
        """Record that one unit of ``to`` costs ``rate`` units of ``source``."""
        self._rates[Pair(source, to)] = rate

    def rate(self, source: str, to: str) -> int:
        """Return the rate from ``source`` to ``to``; 0 when unknown."""
        if source == to:
            return 1
        return self._rates.get(Pair(source, to), 0)