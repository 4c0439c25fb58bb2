"""Labels printed on the certificate ("Vol. No", "Serial No")."""

from __future__ import annotations

from .codec.record import CertificateNumber


def volume_label(record: CertificateNumber) -> str:
    """
    "1-C/2024", or "1-C" without a volume year.

    Empty parts are left out together with their separator.
    """
    label = "-".join(p for p in (record.volume_number, record.volume_letter) if p)
    if record.volume_year:
        label = f"{label}/{record.volume_year}" if label else record.volume_year
    return label


def serial_label(record: CertificateNumber) -> str:
    """Serial label: "3/2026", or "3" without a serial year."""
    if record.serial_number and record.serial_year:
        return f"{record.serial_number}/{record.serial_year}"
    return record.serial_number or record.serial_year
