"""Best-effort contact extraction for ranked candidates."""

import re

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}", re.ASCII)

MAX_NAME_LENGTH = 50


def extract_email(text: str) -> str:
    match = EMAIL_RE.search(text)
    return match.group() if match else ""


def extract_phone(text: str) -> str:
    match = PHONE_RE.search(text)
    return match.group().strip() if match else ""


def extract_name(text: str) -> str:
    """First non-blank line, truncated. Empty string if the text is blank."""
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped:
            return stripped[:MAX_NAME_LENGTH]
    return ""


def extract_contact_info(text: str) -> dict[str, str]:
    return {
        "name": extract_name(text),
        "email": extract_email(text),
        "phone": extract_phone(text),
    }
