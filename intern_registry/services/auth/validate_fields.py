# FILE: intern_registry/services/auth/validate_fields.py
# Scop:
#   - Verificări de input comune serviciilor de auth (câmpuri obligatorii, format email).
#
# Observație:
#   - Ridică ValidationError (400) cu mesajul pe care clientul îl afișează ca atare.

import re

from ...errors import ValidationError

EMAIL_RE = re.compile(r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}$")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))


def require_fields_or_raise(*values, message: str = "All fields are required") -> None:
    # None și "" contează ambele ca lipsă (câmpurile text vin deja trim-uite)
    if any(not v for v in values):
        raise ValidationError(message)


def validate_email_or_raise(email: str) -> None:
    if not is_valid_email(email):
        raise ValidationError("Invalid email format")
