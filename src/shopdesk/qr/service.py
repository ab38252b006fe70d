"""QR payloads identifying an employee at the attendance scanner.

A badge encodes ``employee:<id>``. Scanners that were configured before the
prefix existed send the bare id, which is accepted too.
"""

from __future__ import annotations

import io

import qrcode

from ..common.validators import require_positive_int
from ..core.constants import QR_PAYLOAD_PREFIX
from ..core.exceptions import ValidationError


def build_payload(employee_id: int) -> str:
    return f"{QR_PAYLOAD_PREFIX}{require_positive_int(employee_id, 'employee_id')}"


def parse_payload(text: str) -> int:
    value = (text or "").strip()
    if not value:
        raise ValidationError("QR code is empty")
    if value.lower().startswith(QR_PAYLOAD_PREFIX):
        value = value[len(QR_PAYLOAD_PREFIX):]
    if not value.isdigit():
        raise ValidationError("QR code does not identify an employee")
    return require_positive_int(value, "employee_id")


def render_png(employee_id: int) -> bytes:
    img = qrcode.make(build_payload(employee_id))
    buf = io.BytesIO()
    img.save(buf)
    return buf.getvalue()

