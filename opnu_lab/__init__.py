"""
OPNU Lab Classes

Small in-memory value objects: a bank account with transaction fees,
a student record with tuition, and a normalized hours/minutes time span.
"""

from .accounts import BankAccount
from .students import Student
from .timespan import TimeSpan

__version__ = "1.0.0"

__all__ = ["BankAccount", "Student", "TimeSpan"]
