import re
from decimal import Decimal, InvalidOperation

from ..errors import InvalidMonetaryValue

# plain non-negative decimal: "35", "35.3", "35.35"
_MONEY_RE = re.compile(r"[0-9]+(\.[0-9]+)?")

def parse_money(value: str, field: str = "value") -> Decimal:
    """
    Parse a submitted monetary string into an exact Decimal.
    No sign, exponent, whitespace or grouping separators are accepted.
    """
    if not isinstance(value, str) or not _MONEY_RE.fullmatch(value):
        raise InvalidMonetaryValue(str(value), field)
    try:
        return Decimal(value)
    except InvalidOperation:
        raise InvalidMonetaryValue(value, field)
