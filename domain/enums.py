"""
Domain enums for the restaurant application.
Contains all enumeration types used across the domain schemas.
"""

import enum


class PaymentMethod(str, enum.Enum):
    """How an invoice is settled"""

    CARD = "CARD"
    CASH = "CASH"


class PaymentStatus(str, enum.Enum):
    """Invoice settlement state"""

    PENDING = "PENDING"
    PAID = "PAID"


class EmployeeRole(str, enum.Enum):
    """Staff roles"""

    MANAGER = "manager"
    CHEF = "chef"
    WAITER = "waiter"
    CASHIER = "cashier"
