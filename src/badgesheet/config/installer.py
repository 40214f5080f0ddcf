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


"""Locate the TOML file that configures a run."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "badgesheet"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().with_name("default.toml")
CONFIG_FILENAME = "config.toml"
CONFIG_ENV = "BADGESHEET_CONFIG"


def user_config_path() -> Path:
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        return Path(xdg_home) / APP_NAME / CONFIG_FILENAME
    return Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def _candidates(path: str | Path | None) -> Iterator[tuple[Path, bool]]:
    # (candidate, must_exist): explicit choices are returned even when missing
    # so the loader can report them.
    if path:
        yield Path(path), False
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        yield Path(env_path), False
    yield user_config_path(), True


def resolve_config_path(path: str | Path | None = None) -> Path:
    for candidate, must_exist in _candidates(path):
        if not must_exist or candidate.is_file():
            return candidate
    return DEFAULT_CONFIG_PATH


def init_user_config() -> Path:
    """Copy the packaged defaults to the user config dir, keeping an existing file."""
    dest = user_config_path()
    if not dest.exists():
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(DEFAULT_CONFIG_PATH, dest)
    return dest
