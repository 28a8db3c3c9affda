"""
Identity model

Parties are identified by their Algorand account address.
https://developer.algorand.org/docs/get-details/accounts/
"""

from typing import NewType

from algosdk.encoding import is_valid_address

# Algorand account address. The address is 58 characters long
Address = NewType("Address", str)


def to_address(value: str) -> Address:
    """
    :exception ValueError: if `value` is not a valid Algorand address
    """
    value = value.strip()
    if not is_valid_address(value):
        raise ValueError(f"invalid Algorand address: {value!r}")
    return Address(value)
