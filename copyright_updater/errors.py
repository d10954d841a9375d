# Program: Copyright Updater Errors
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Per-file failure types raised while rewriting headers."""

from __future__ import annotations


class HeaderUpdateError(RuntimeError):
    """Base class for failures that affect a single file only."""


class HistoryUnavailableError(HeaderUpdateError):
    """Raised when git has no usable history for a file."""


class MalformedTimestampError(HeaderUpdateError):
    """Raised when git output cannot be parsed as a timestamp."""


class UnresolvedPlaceholderError(HeaderUpdateError):
    """Raised when a rendered banner still contains a ``{{...}}`` token."""


# Created by Dr. Z. Bakhtiyorov
