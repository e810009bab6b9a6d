"""Shared helpers: logging setup and id generation."""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import uuid
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "courtpairing"


def setup_logger(name: str) -> logging.Logger:
    """Return the logger for a module.

    Handlers are installed once on the package logger by
    :func:`configure_logging`; module loggers only propagate to it.
    """
    return logging.getLogger(name)


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Safe to call more than once: a second call only changes the level.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    if not any(getattr(h, "_courtpairing", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._courtpairing = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root


def generate_id(prefix: str = "") -> str:
    """Generate a unique identifier, optionally prefixed (e.g. ``match_...``)."""
    unique = uuid.uuid4().hex
    if prefix:
        return f"{prefix.lower()}_{unique}"
    return unique
