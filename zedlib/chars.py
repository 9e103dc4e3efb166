"""Character classification, case conversion and UTF-8 helpers.

Character arguments may be given either as an integer code point or as a
one-character string.  Case conversion returns a value of the same kind as
its argument.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Union

Char = Union[int, str]


def _codes(text: str) -> tuple[int, ...]:
    return tuple(ord(c) for c in text)


# Interleaved (upper, lower) starts and ends of contiguous case ranges.
_GROUP_BEG = _codes("AaÀàØøΈέΌόΑαΣσϘϙϞϟАаЀѐ")
_GROUP_END = _codes("ZzÖöÞþΊίΏώΡρΫϋϜϝϮϯЯяЏџ")

# Interleaved (upper, lower) starts and ends of alternating case sequences.
_SEQ_BEG = _codes("ĀāĲĳĹĺŊŋŹźƠơǍǎǞǟǸǹȢȣɆɇḂḃͰͱѠѡҊҋӁӂӐӑ")
_SEQ_END = _codes("ĮįĶķŇňŶŷŽžƤƥǛǜǮǯȞȟȲȳɎɏẄẅͶͷҀҁҾҿӍӎӾӿ")

# Interleaved (upper, lower) pairs that map directly onto each other.
_DIRECT = _codes("ŸÿƂƃƄƅƇƈƋƌƑƒƘƙƧƨƬƭƯưƳƴƵƶƸƹƼƽǴǵȻȼɁɂỲỳΆάϷϸϺϻ")

# Lowercase forms that convert to uppercase, but not the other way.
_ALTERNATE = _codes("Σς")

# (upper, title, lower) triples.
_CAMEL = _codes("ǄǅǆǇǈǉǊǋǌǱǲǳ")


def _cp(ch: Char) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    return int(ch)


def _like(original: Char, cp: int) -> Char:
    return chr(cp) if isinstance(original, str) else cp


def _pairs(table: tuple[int, ...]) -> zip:
    return zip(table[0::2], table[1::2])


def _triples(table: tuple[int, ...]) -> zip:
    return zip(table[0::3], table[1::3], table[2::3])


def is_upper_alpha(ch: Char) -> bool:
    """True for the characters A-Z only."""
    return ord("A") <= _cp(ch) <= ord("Z")


def is_lower_alpha(ch: Char) -> bool:
    """True for the characters a-z only."""
    return ord("a") <= _cp(ch) <= ord("z")


def is_upper(ch: Char) -> bool:
    """True if the character has a distinct lowercase form."""
    cp = _cp(ch)
    return _to_lower(cp, False) != cp


def is_lower(ch: Char) -> bool:
    """True if the character has a distinct uppercase form."""
    cp = _cp(ch)
    return _to_upper(cp, False) != cp


def _to_upper(cp: int, camel: bool) -> int:
    for upper_beg, lower_beg, lower_end in zip(
        _GROUP_BEG[0::2], _GROUP_BEG[1::2], _GROUP_END[1::2]
    ):
        if cp < lower_beg:
            break
        if cp <= lower_end:
            return cp - lower_beg + upper_beg

    for lower_beg, lower_end in zip(_SEQ_BEG[1::2], _SEQ_END[1::2]):
        if cp < lower_beg:
            break
        if cp <= lower_end:
            return cp - 1

    for upper, lower in _pairs(_DIRECT):
        if cp < lower:
            break
        if cp == lower:
            return upper

    for upper, lower in _pairs(_ALTERNATE):
        if cp < lower:
            break
        if cp == lower:
            return upper

    for upper, title, lower in _triples(_CAMEL):
        if cp < upper:
            break
        if camel:
            if cp in (upper, lower):
                return title
        elif cp in (title, lower):
            return upper

    return cp


def _to_lower(cp: int, alternate: bool) -> int:
    if alternate:
        for upper, lower in _pairs(_ALTERNATE):
            if cp < upper:
                break
            if cp == upper:
                return lower

    for upper_beg, upper_end, lower_beg in zip(
        _GROUP_BEG[0::2], _GROUP_END[0::2], _GROUP_BEG[1::2]
    ):
        if cp < upper_beg:
            break
        if cp <= upper_end:
            return cp - upper_beg + lower_beg

    for upper_beg, upper_end in zip(_SEQ_BEG[0::2], _SEQ_END[0::2]):
        if cp < upper_beg:
            break
        if cp <= upper_end:
            return cp + 1

    for upper, lower in _pairs(_DIRECT):
        if cp < upper:
            break
        if cp == upper:
            return lower

    for upper, title, lower in _triples(_CAMEL):
        if cp < upper:
            break
        if cp in (upper, title):
            return lower

    return cp


def to_upper(ch: Char, camel: bool = False) -> Char:
    """Convert a character to uppercase, or to title case if ``camel`` is set."""
    return _like(ch, _to_upper(_cp(ch), camel))


def to_lower(ch: Char, alternate: bool = False) -> Char:
    """Convert a character to lowercase, using alternate forms if requested."""
    return _like(ch, _to_lower(_cp(ch), alternate))


def is_alpha(ch: Char) -> bool:
    """True for the characters A-Z and a-z."""
    return is_lower_alpha(ch) or is_upper_alpha(ch)


def numeral_value(ch: Char) -> int:
    """Value of a numeral character (0-9, then a-z/A-Z from 10), or -1."""
    cp = _cp(ch)
    if ord("0") <= cp <= ord("9"):
        return cp - ord("0")
    if is_lower_alpha(cp):
        return cp - ord("a") + 10
    if is_upper_alpha(cp):
        return cp - ord("A") + 10
    return -1


def numeral(value: int) -> str:
    """Numeral character for a value; '0' if the value is out of range."""
    if value > 36 or value < 1:
        return "0"
    if value < 10:
        return chr(value + ord("0"))
    return chr(value - 10 + ord("A"))


def is_numeric(ch: Char, base: int = 10) -> bool:
    """True if the character is a digit in the given base."""
    value = numeral_value(ch)
    return -1 < value < base


def is_alpha_numeric(ch: Char) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(ch) or is_numeric(ch)


_WHITE_SPACE = frozenset({9, 10, 13, 32, 12, 11, 0})


def is_white_space(ch: Char) -> bool:
    """True for tab, newline, carriage return, space, form feed, vertical tab and NUL."""
    return _cp(ch) in _WHITE_SPACE


def to_utf8(ch: Char) -> bytes:
    """Encode a single character as UTF-8."""
    cp = _cp(ch)
    if cp < 0x80:
        return bytes([cp])
    if cp < 0x0800:
        return bytes([((cp >> 6) & 0x1F) + 0xC0, (cp & 0x3F) + 0x80])
    if cp < 0xFFFF:
        return bytes(
            [
                ((cp >> 12) & 0x0F) + 0xE0,
                ((cp >> 6) & 0x3F) + 0x80,
                (cp & 0x3F) + 0x80,
            ]
        )
    return bytes(
        [
            ((cp >> 18) & 0x07) + 0xF0,
            ((cp >> 12) & 0x3F) + 0x80,
            ((cp >> 6) & 0x3F) + 0x80,
            (cp & 0x3F) + 0x80,
        ]
    )


def len_to_utf8(ch: Char) -> int:
    """Number of bytes the UTF-8 encoding of a character takes."""
    cp = _cp(ch)
    if cp < 0x80:
        return 1
    if cp < 0x0800:
        return 2
    if cp < 0xFFFF:
        return 3
    return 4


def from_utf8(data: bytes | None) -> int:
    """Decode the UTF-8 sequence at the start of ``data``.

    Returns ord('?') for an invalid or truncated sequence, and 0 for no data.
    """
    if data is None:
        return 0
    b = (bytes(data[:4]) + b"\x00\x00\x00\x00")[:4]
    lead = b[0]
    if lead < 0x80:
        return lead
    if lead < 0xC0:
        return ord("?")
    if lead < 0xE0:
        if b[1]:
            return ((lead & 0x1F) << 6) + (b[1] & 0x3F)
        return ord("?")
    if lead < 0xF0:
        if b[1] and b[2]:
            return ((lead & 0x0F) << 12) + ((b[1] & 0x3F) << 6) + (b[2] & 0x3F)
        return ord("?")
    if b[1] and b[2] and b[3]:
        return (
            ((lead & 0x0F) << 18)
            + ((b[1] & 0x3F) << 12)
            + ((b[2] & 0x3F) << 6)
            + (b[3] & 0x3F)
        )
    return ord("?")


def len_from_utf8(data: bytes | None) -> int:
    """Length of the UTF-8 sequence started by the first byte; 0 if none."""
    if not data:
        return 0
    lead = data[0]
    if lead < 0x80:
        return 1
    if lead < 0xC0:
        return 0
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def is_utf8(data: bytes | None) -> bool:
    """Check whether ``data`` starts with a UTF-8 sequence as this library reads it."""
    if not data:
        return False
    lead = data[0]
    if lead < 0x80:
        return True
    if lead < 0xC0:
        return False
    if lead < 0xE0:
        needed = 2
    elif lead < 0xF0:
        needed = 3
    else:
        needed = 4
    if len(data) < needed:
        return False
    return all((byte & 0xC0) == 0xC0 for byte in data[1:needed])


def iter_utf8(data: bytes) -> Iterator[int]:
    """Yield the code points of a UTF-8 byte string, one sequence at a time."""
    pos = 0
    end = len(data)
    while pos < end:
        chunk = data[pos : pos + 4]
        yield from_utf8(chunk)
        pos += max(1, len_from_utf8(chunk))