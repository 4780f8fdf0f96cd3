"""Singular/plural suffix selection for output labels."""

from enum import Enum


class PluralRule(Enum):
    """How a label stem changes between one and many."""

    ADD_S = ("", "s")  # "socket" / "sockets"
    Y_TO_IES = ("y", "ies")  # "director" + "y" / "ies"


def pluralize(count: int, rule: PluralRule) -> str:
    """Return the suffix for ``count`` items: singular only for exactly one."""
    singular, plural = rule.value
    return singular if count == 1 else plural


def directory_heading(count: int) -> str:
    return f"Director{pluralize(count, PluralRule.Y_TO_IES)}"
