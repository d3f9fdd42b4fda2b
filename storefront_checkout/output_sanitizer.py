"""Redaction helpers, applied to card data and emails before they reach logs or error text."""
import re

# Card number patterns (13-19 digits, optionally separated)
_CARD_NUMBER_PATTERN = re.compile(
    r"\b(?:\d{4}[-\s]?){2,4}\d{1,4}\b"
)

_EMAIL_PATTERN = re.compile(r"\b([A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*@([A-Za-z0-9.-]+\.[A-Za-z]{2,})\b")

# ANSI escape codes (Playwright call logs are colourised)
_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def redact_card_number(number: str) -> str:
    """Mask a card number to show only last 4 digits."""
    digits = re.sub(r"\D", "", number)
    if len(digits) < 4:
        return "****"
    return f"****-****-****-{digits[-4:]}"


def redact_email(email: str) -> str:
    """Partially redact an email address."""
    if "@" not in email:
        return email
    local, domain = email.split("@", 1)
    return f"{local[0]}***@{domain}"


def sanitize_output(text: str, max_chars: int = 50000) -> str:
    """
    Sanitize free text (exception messages, Playwright call logs).

    - Strips ANSI escape codes
    - Redacts card numbers
    - Redacts email addresses
    - Truncates to max_chars
    """
    text = _ANSI_PATTERN.sub("", text)
    text = _CARD_NUMBER_PATTERN.sub("[CARD REDACTED]", text)
    text = _EMAIL_PATTERN.sub(r"\1***@\2", text)

    if len(text) > max_chars:
        text = text[:max_chars] + f"\n\n[... truncated at {max_chars} chars]"

    return text
