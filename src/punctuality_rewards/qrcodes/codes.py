from __future__ import annotations

import io
import random
import re
import string
from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

import qrcode

from ..core.exceptions import ValidationError

_BASE36 = string.digits + string.ascii_uppercase
_CHECKIN_PATH = re.compile(r"/checkin/([A-Za-z0-9-]+)/?$")


def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_code(now: datetime, rng: Optional[random.Random] = None) -> str:
    """Printable code such as ``SK2026-MGX3K2A1-4F9QZ0``."""
    rng = rng or random.SystemRandom()
    millis = int(now.timestamp() * 1000)
    suffix = "".join(rng.choice(_BASE36) for _ in range(6))
    return f"SK{now.year}-{to_base36(millis)}-{suffix}"


def parse_scanned_payload(payload: Optional[str]) -> str:
    """Extract the code from a scanned value.

    Scanners deliver either the bare code or the full check-in URL. Any other
    value is returned as is and left to the token lookup to reject.
    """
    if payload is not None and not isinstance(payload, str):
        raise ValidationError("QR code must be a string")
    value = (payload or "").strip()
    if value and "://" in value:
        match = _CHECKIN_PATH.search(urlparse(value).path)
        if match:
            return match.group(1)
    return value


def checkin_url(base_url: str, code: str) -> str:
    return f"{base_url.rstrip('/')}/{code}"


def render_png(data: str) -> bytes:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
