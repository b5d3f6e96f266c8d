"""Lenient number parsing for scene text."""

_UINT64 = 1 << 64
_UINT32 = 1 << 32


def _to_int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= 1 << 31 else value


def parse_double(text: str) -> float:
    """Parse a decimal number such as ``"  -12.75"``.

    Leading spaces and one optional sign are accepted; parsing stops at the
    first character that does not fit. Exponents are not recognised.
    """
    i = 0
    n = len(text)
    while i < n and text[i] == " ":
        i += 1
    sign = 1.0
    if i < n and text[i] in "+-":
        if text[i] == "-":
            sign = -1.0
        i += 1
    res = 0.0
    while i < n and text[i].isascii() and text[i].isdigit():
        res = res * 10.0 + (ord(text[i]) - ord("0"))
        i += 1
    if i >= n or text[i] != ".":
        return res * sign
    i += 1
    decimals = 0
    while i < n and text[i].isascii() and text[i].isdigit():
        res = res * 10.0 + (ord(text[i]) - ord("0"))
        i += 1
        decimals += 1
    for _ in range(decimals):
        res /= 10.0
    return res * sign


def parse_int(text: str) -> int:
    """Parse an integer the way the C ``atoi`` family does, as a 32-bit int.

    Leading whitespace is skipped. More than one sign character yields 0.
    Overflow wraps around as a 32-bit signed value.
    """
    i = 0
    n = len(text)
    while i < n and (9 <= ord(text[i]) <= 13 or text[i] == " "):
        i += 1
    signs = 0
    negatives = 0
    while i < n and text[i] in "+-":
        if text[i] == "-":
            negatives += 1
        signs += 1
        i += 1
    conv = 0
    while i < n and "0" <= text[i] <= "9":
        conv = (conv * 10 + ord(text[i]) - ord("0")) % _UINT64
        i += 1
    if signs > 1:
        return 0
    if negatives == 1:
        return _to_int32(-conv % _UINT64)
    return _to_int32(conv)