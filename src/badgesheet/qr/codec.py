#!/usr/bin/env python3
from __future__ import annotations

import io
from dataclasses import dataclass

import segno

# Badges are printed and handled, so codes always carry the highest correction level.
ERROR_LEVEL = "H"


@dataclass(frozen=True)
class QrConfig:
    scale: int = 10
    border: int = 4
    dark: str = "#000000"
    # None leaves the background transparent.
    light: str | None = None


def make_qr(url: str) -> segno.QRCode:
    return segno.make(url, error=ERROR_LEVEL, micro=False, boost_error=False)


def qr_bytes(url: str, *, config: QrConfig | None = None) -> bytes:
    """Rasterise ``url`` to PNG bytes ready to embed in the document."""
    config = config or QrConfig()
    if not url:
        raise ValueError("QR payload cannot be empty")
    buf = io.BytesIO()
    make_qr(url).save(
        buf,
        kind="png",
        scale=config.scale,
        border=config.border,
        dark=config.dark,
        light=_color_or_none(config.light),
    )
    return buf.getvalue()


def _color_or_none(value: str | None) -> str | None:
    if value is None or value.strip().lower() in ("", "none", "transparent"):
        return None
    return value.strip()
