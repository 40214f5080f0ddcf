#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from ..core.errors import ConfigurationError
from ..qr.codec import QrConfig
from ..render.types import BadgeStyle, DocumentInfo, PageSetup
from .installer import resolve_config_path

PAPER_SIZES = frozenset({"A4", "LETTER"})


@dataclass(frozen=True)
class AppConfig:
    style: BadgeStyle = field(default_factory=BadgeStyle)
    page: PageSetup = field(default_factory=PageSetup)
    qr_config: QrConfig = field(default_factory=QrConfig)
    source_path: Path | None = None


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    try:
        data = _load_toml(config_path)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"config file not found: {config_path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"invalid TOML in {config_path}: {exc}") from exc
    config = build_app_config(data)
    return AppConfig(
        style=config.style,
        page=config.page,
        qr_config=config.qr_config,
        source_path=config_path,
    )


def build_app_config(data: dict[str, object]) -> AppConfig:
    defaults_style = BadgeStyle()
    defaults_info = DocumentInfo()
    defaults_page = PageSetup()

    brand_cfg = _get_dict(data, "brand")
    document_cfg = _get_dict(data, "document")
    fonts_cfg = _get_dict(data, "fonts")
    instructions_cfg = _get_dict(data, "instructions")

    style = BadgeStyle(
        brand_label=_parse_str(
            brand_cfg.get("label"), field="brand.label", default=defaults_style.brand_label
        ),
        font_family=_parse_str(
            fonts_cfg.get("family"), field="fonts.family", default=defaults_style.font_family
        ),
        front_font_size=_parse_positive_number(
            fonts_cfg.get("front_size"),
            field="fonts.front_size",
            default=defaults_style.front_font_size,
        ),
        back_font_size=_parse_positive_number(
            fonts_cfg.get("back_size"),
            field="fonts.back_size",
            default=defaults_style.back_font_size,
        ),
        instructions_title=_parse_str(
            instructions_cfg.get("title"),
            field="instructions.title",
            default=defaults_style.instructions_title,
        ),
        instructions_body=_parse_str_tuple(
            instructions_cfg.get("body"),
            field="instructions.body",
            default=defaults_style.instructions_body,
        ),
    )

    info = DocumentInfo(
        **{
            key: _parse_str(
                document_cfg.get(key), field=f"document.{key}", default=getattr(defaults_info, key)
            )
            for key in ("creator", "author", "title", "subject", "keywords")
        },
        creation_date=_parse_datetime(
            document_cfg.get("creation_date"), field="document.creation_date"
        ),
    )
    paper_size = _parse_str(
        document_cfg.get("paper_size"),
        field="document.paper_size",
        default=defaults_page.paper_size,
    )
    paper_size = paper_size.strip().upper()
    if paper_size not in PAPER_SIZES:
        raise ConfigurationError("document.paper_size must be A4 or LETTER")
    page = PageSetup(
        paper_size=paper_size,
        bottom_margin_mm=_parse_positive_number(
            document_cfg.get("bottom_margin_mm"),
            field="document.bottom_margin_mm",
            default=defaults_page.bottom_margin_mm,
        ),
        info=info,
    )
    return AppConfig(style=style, page=page, qr_config=build_qr_config(_get_dict(data, "qr")))


def build_qr_config(cfg: dict[str, object] | None = None) -> QrConfig:
    cfg = cfg or {}
    defaults = QrConfig()
    error = cfg.get("error")
    if error is not None and (not isinstance(error, str) or error.strip().upper() != "H"):
        raise ConfigurationError("qr.error is fixed at H for badge codes")
    return QrConfig(
        scale=int(
            _parse_positive_number(cfg.get("scale"), field="qr.scale", default=defaults.scale)
        ),
        border=_parse_non_negative_int(
            cfg.get("border"), field="qr.border", default=defaults.border
        ),
        dark=_parse_str(cfg.get("dark"), field="qr.dark", default=defaults.dark),
        light=_parse_optional_str(cfg.get("light"), field="qr.light"),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"[{key}] must be a table")
    return value


def _parse_str(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigurationError(f"{field} must be a string")
    return value


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    return _parse_str(value, field=field, default="")


def _parse_str_tuple(value: object, *, field: str, default: tuple[str, ...]) -> tuple[str, ...]:
    if value is None:
        return default
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError(f"{field} must be a list of strings")
    return tuple(value)


def _parse_positive_number(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{field} must be a number")
    if value <= 0:
        raise ConfigurationError(f"{field} must be positive")
    return value


def _parse_non_negative_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationError(f"{field} must be a non-negative integer")
    return value


def _parse_datetime(value: object, *, field: str) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ConfigurationError(f"{field} must be an ISO 8601 timestamp") from exc
    if not isinstance(value, datetime):
        raise ConfigurationError(f"{field} must be a timestamp")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value
