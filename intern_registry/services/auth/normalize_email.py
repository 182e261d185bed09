# FILE: intern_registry/services/auth/normalize_email.py
# Scop:
#   - Normalizare email pentru căutare și deduplicare (case-insensitive).
#
# Debug:
#   - Dacă vezi duplicate, vreun query/insert nu trece prin normalize_email().

def normalize_email(email: str) -> str:
    if email is None:
        return ""
    return str(email).strip().lower()
