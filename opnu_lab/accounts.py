"""
Bank Account Module

A single-owner account holding a float balance and a flat per-transaction fee.
Invalid operations never raise: deposits are ignored, withdrawals and
transfers report failure through their boolean result.
"""

from typing import Optional

from .config import get_config
from .logging_config import get_logger, log_action


logger = get_logger("opnu_lab.accounts")


class BankAccount:
    """
    Bank account with deposit, withdraw and transfer operations.

    The transaction fee is added to the funds required by every withdrawal
    and transfer and is charged only to the account initiating them.
    """

    def __init__(self, name: Optional[str] = None, transaction_fee: Optional[float] = None):
        self._name = name
        self.balance = 0.0
        if transaction_fee is None:
            transaction_fee = get_config().default_transaction_fee
        self.transaction_fee = transaction_fee

    def deposit(self, amount: float) -> None:
        """Add a positive amount to the balance; other amounts are ignored"""
        if amount > 0:
            self.balance = self.balance + amount
            log_action(logger, "debug", "Deposit applied", action="deposit",
                       resource=self._name, extra={"amount": amount, "balance": self.balance})
        else:
            log_action(logger, "debug", "Deposit ignored: non-positive amount",
                       action="deposit", resource=self._name, extra={"amount": amount})

    def get_balance(self) -> float:
        """Get current balance"""
        return self.balance

    def withdraw(self, amount: float) -> bool:
        """
        Withdraw an amount plus the transaction fee.

        Args:
            amount: Amount to withdraw, must be positive

        Returns:
            True if the balance covered amount + fee and was debited,
            False otherwise (balance unchanged)
        """
        if amount <= 0:
            log_action(logger, "debug", "Withdrawal rejected: non-positive amount",
                       action="withdraw", resource=self._name, extra={"amount": amount})
            return False

        total_amount = amount + self.transaction_fee

        if self.balance >= total_amount:
            self.balance = self.balance - total_amount
            log_action(logger, "debug", "Withdrawal applied", action="withdraw",
                       resource=self._name,
                       extra={"amount": amount, "fee": self.transaction_fee, "balance": self.balance})
            return True

        log_action(logger, "debug", "Withdrawal rejected: insufficient funds",
                   action="withdraw", resource=self._name,
                   extra={"amount": amount, "fee": self.transaction_fee, "balance": self.balance})
        return False

    def transfer(self, receiver: 'BankAccount', amount: float) -> bool:
        """
        Transfer an amount to another account.

        The sender pays amount + fee, the receiver is credited the
        nominal amount only.

        Args:
            receiver: Account to credit
            amount: Amount to transfer, must be positive

        Returns:
            True if the transfer was applied, False otherwise
        """
        if amount <= 0:
            log_action(logger, "debug", "Transfer rejected: non-positive amount",
                       action="transfer", resource=self._name, extra={"amount": amount})
            return False

        total_amount = amount + self.transaction_fee

        if self.balance >= total_amount:
            if self.withdraw(amount):
                receiver.deposit(amount)
                log_action(logger, "debug", "Transfer applied", action="transfer",
                           resource=self._name,
                           extra={"amount": amount, "receiver": receiver.get_name()})
                return True

        log_action(logger, "debug", "Transfer rejected: insufficient funds",
                   action="transfer", resource=self._name,
                   extra={"amount": amount, "fee": self.transaction_fee, "balance": self.balance})
        return False

    def get_name(self) -> Optional[str]:
        """Get account owner name"""
        return self._name

    def __repr__(self) -> str:
        return (f"BankAccount(name={self._name!r}, balance={self.balance!r}, "
                f"transaction_fee={self.transaction_fee!r})")
