import hashlib


def mask_phone(phone: str | None) -> str | None:
    if not phone:
        return phone
    # last digits + hash
    suffix = phone[-4:]
    digest = hashlib.sha256(phone.encode("utf-8")).hexdigest()[:8]
    return f"...{suffix}#{digest}"


def shorten_body(body: str | None, max_len: int = 40) -> str | None:
    if body is None:
        return None
    return body if len(body) <= max_len else body[:max_len] + "..."


def mask_sid(sid: str | None) -> str | None:
    """AC1234567890 -> AC...7890"""
    if not sid:
        return sid

    if len(sid) <= 6:
        return sid  # too short to mask sensibly

    return f"{sid[:2]}...{sid[-4:]}"
