from .customer import Customer
from .staff import Staff, StaffRole

__all__ = [
    "Customer",
    "Staff",
    "StaffRole",
]
