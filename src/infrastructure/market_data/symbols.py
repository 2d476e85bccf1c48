"""Ticker symbol normalization for the Yahoo chart API."""

from __future__ import annotations

# Paris large caps commonly entered without their exchange suffix
_PARIS_DEFAULTS = frozenset(
    {"AIR", "OR", "MC", "EL", "DG", "BNP", "ACA", "GLE", "RMS", "SAN", "SU", "AI"}
)

_INDEX_ALIASES = {
    "FCHI": "^FCHI",
    "GSPC": "^GSPC",
}


def normalize_symbol(raw: str) -> str:
    """Trim and upper-case a ticker, then apply index aliases and the Paris suffix.

    Symbols that already carry an exchange suffix ("MC.PA") or an index caret
    ("^GSPC") are returned as-is after upper-casing.  Blank input is returned
    unchanged.
    """
    if not raw or not raw.strip():
        return raw
    symbol = raw.strip().upper()

    if symbol in _INDEX_ALIASES:
        return _INDEX_ALIASES[symbol]
    if "." in symbol or symbol.startswith("^"):
        return symbol
    if symbol in _PARIS_DEFAULTS:
        return f"{symbol}.PA"
    return symbol
