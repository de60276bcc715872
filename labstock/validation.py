# labstock/validation.py
import logging
import re
from typing import List

from labstock.errors import ParseError, ValidationError
from labstock.parsing import PRICE_MESSAGE, QUANTITY_MESSAGE, parse_quantity

log = logging.getLogger(__name__)

# --- simple validators ---
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
ROLL_RE = re.compile(r"^[A-Z0-9]{3,8}$")
SECURITY_CODE = 100
MIN_NAME_LEN = 3
MIN_MESSAGE_WORDS = 5

CONTACT_SUCCESS = "[COMMS SUCCESS] Message Submitted. Awaiting response."


def validate_item_form(name: str, price, quantity, *, check_quantity: bool = True) -> List[str]:
    """Business rules for the item entry form; price/quantity are already parsed.

    In edit mode the quantity field is locked, so callers pass check_quantity=False.
    """
    errors = []
    if len(name or "") < MIN_NAME_LEN:
        errors.append("Item Name must be at least 3 characters.")
    if price is None or price != price or price <= 0:
        errors.append(PRICE_MESSAGE)
    if check_quantity and (quantity is None or quantity < 0):
        errors.append(QUANTITY_MESSAGE)
    return errors


def validate_contact_form(
    full_name: str,
    email: str,
    roll_number: str,
    security_code,
    message: str,
) -> List[str]:
    errors = []
    if len((full_name or "").strip()) < MIN_NAME_LEN:
        errors.append("Full Name must be at least 3 characters.")
    if not EMAIL_RE.match((email or "").strip()):
        errors.append("Invalid Email format.")
    if not ROLL_RE.match((roll_number or "").strip()):
        errors.append("Roll/Employee ID must be 3-8 uppercase letters/numbers.")
    try:
        code = parse_quantity(security_code)
    except ParseError:
        code = None
    if code != SECURITY_CODE:
        errors.append("Security Code must be a 3 digit number.")
    if len((message or "").split()) < MIN_MESSAGE_WORDS:
        errors.append("Detailed Message must contain at least 5 words.")
    return errors


def submit_contact(full_name: str, email: str, roll_number: str, security_code, message: str) -> str:
    """Validate a contact message; returns the confirmation text.

    Raises ValidationError carrying every violated rule.
    """
    errors = validate_contact_form(full_name, email, roll_number, security_code, message)
    if errors:
        raise ValidationError(errors)
    log.info("Contact message accepted from %s", (email or "").strip())
    return CONTACT_SUCCESS
