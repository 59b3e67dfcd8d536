from typing import List, Optional

from gateway.core.exceptions import ValidationException


def require_text(value: Optional[str], message: str, field: Optional[str] = None) -> str:
    """Return ``value`` stripped, rejecting missing or blank input."""
    if value is None or not value.strip():
        raise ValidationException(message, field=field)
    return value.strip()


def parse_positive_int(value: Optional[str], message: str, field: Optional[str] = None) -> int:
    """Parse a base-10 integer greater than zero."""
    digits = value.strip() if value is not None else ""
    # int() alone would accept "+5", "1_0" and non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        raise ValidationException(message, field=field)
    out = int(digits)
    if out <= 0:
        raise ValidationException(message, field=field)
    return out


def parse_optional_positive_int(value: Optional[str], message: str, field: Optional[str] = None) -> Optional[int]:
    if value is None:
        return None
    return parse_positive_int(value, message, field=field)


def validate_symbol(symbol: Optional[str], min_length: int = 2, max_length: int = 10) -> str:
    """Validate a single cryptocurrency ticker symbol."""
    symbol = require_text(symbol, "Cryptocurrency symbol is required", field="symbol")
    if len(symbol) < min_length or len(symbol) > max_length:
        raise ValidationException("Invalid cryptocurrency symbol format", field="symbol")
    return symbol


def parse_symbol_list(symbols: Optional[str], max_symbols: int = 10) -> List[str]:
    """Split a comma-separated ``symbols`` query value into non-empty tokens."""
    if not symbols:
        raise ValidationException(
            "Symbols query parameter is required (e.g., ?symbols=BTC,ETH,ADA)", field="symbols"
        )
    tokens = [token.strip() for token in symbols.split(",") if token.strip()]
    if not tokens:
        raise ValidationException("At least one cryptocurrency symbol is required", field="symbols")
    if len(tokens) > max_symbols:
        raise ValidationException(f"Maximum {max_symbols} symbols allowed per request", field="symbols")
    return tokens
