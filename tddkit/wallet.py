"""A bitcoin wallet that refuses to overdraw."""


class Bitcoin(int):
    def __str__(self) -> str:
        return f"{int(self)} BTC"


class InsufficientFundsError(Exception):
    def __init__(self, message: str = "cannot withdraw, insufficient funds") -> None:
        super().__init__(message)


class Wallet:
    def __init__(self, balance: int = 0) -> None:
        self.balance = Bitcoin(balance)

    def deposit(self, amount: int) -> None:
        self.balance = Bitcoin(self.balance + amount)

    def withdraw(self, amount: int) -> None:
        if amount > self.balance:
            raise InsufficientFundsError()
        self.balance = Bitcoin(self.balance - amount)