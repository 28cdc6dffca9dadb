"""
Unified validators for account addresses and token amounts.
"""

from eth_utils import is_hex_address, to_checksum_address
from loguru import logger

from roistake.config.business_constants import MAX_TOKEN_AMOUNT, ZERO_ADDRESS


def validate_address(value: str) -> tuple[bool, str | None, str | None]:
    """
    Validate an account address.

    Args:
        value: Address to validate (any case)

    Returns:
        Tuple of (is_valid, checksummed_address, error_message)

    Examples:
        >>> validate_address("0x1234567890123456789012345678901234567890")
        (True, '0x1234567890123456789012345678901234567890', None)
        >>> validate_address("invalid")
        (False, None, 'Address must start with 0x')
    """
    if not value or not isinstance(value, str):
        return False, None, "Address is empty"

    value = value.strip()

    if not value:
        return False, None, "Address is empty"

    if not value.startswith("0x"):
        return False, None, "Address must start with 0x"

    if len(value) != 42:
        return False, None, "Address must be 42 characters"

    if not is_hex_address(value):
        return False, None, "Invalid address format"

    try:
        return True, to_checksum_address(value), None
    except (ValueError, TypeError) as e:
        logger.debug(f"Address validation failed for {value}: {e}")
        return False, None, "Invalid address format"


def normalize_address(value: str) -> str:
    """
    Normalize address to checksum format.

    Args:
        value: Account address

    Returns:
        Checksummed address

    Raises:
        ValueError: If address is invalid
    """
    is_valid, address, error = validate_address(value)
    if not is_valid:
        raise ValueError(error)
    return address


def normalize_optional_address(value: str | None) -> str | None:
    """
    Normalize an optional address; zero address and None mean "none".

    Malformed input also yields None: callers use this for proposals
    that are ignored rather than rejected.

    Args:
        value: Address or None

    Returns:
        Checksummed address or None
    """
    if value is None:
        return None

    is_valid, address, _ = validate_address(value)
    if not is_valid or address.lower() == ZERO_ADDRESS:
        return None
    return address


def validate_token_amount(value: object) -> tuple[bool, int | None, str | None]:
    """
    Validate a token amount in base units.

    Args:
        value: Candidate amount

    Returns:
        Tuple of (is_valid, amount, error_message)

    Examples:
        >>> validate_token_amount(1000)
        (True, 1000, None)
        >>> validate_token_amount(0)
        (False, None, 'Amount must be greater than zero')
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False, None, "Amount must be an integer number of base units"

    if value <= 0:
        return False, None, "Amount must be greater than zero"

    if value > MAX_TOKEN_AMOUNT:
        return False, None, "Amount exceeds the maximum token amount"

    return True, value, None
