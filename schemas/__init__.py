from .contact import (
    CustomerContactOut,
    CustomerContactEmailOut,
    CustomerContactPhoneOut,
    CustomerContactDetails,
)

__all__ = [
    "CustomerContactOut", "CustomerContactEmailOut", "CustomerContactPhoneOut",
    "CustomerContactDetails",
]
