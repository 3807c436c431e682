"""
Conversion utilities for mapping sizes and flags from strings to values and vice versa.
"""

import math
from typing import SupportsInt, Tuple

KIB = 1024
MIB = 1024 ** 2
GIB = 1024 ** 3
TIB = 1024 ** 4
PIB = 1024 ** 5
EIB = 1024 ** 6

KB = 1000
MB = 1000 ** 2
GB = 1000 ** 3
TB = 1000 ** 4
PB = 1000 ** 5
EB = 1000 ** 6

# See https://en.wikipedia.org/wiki/Binary_prefix
BINARY_PREFIXES = ['ki', 'mi', 'gi', 'ti', 'pi', 'ei', 'kib', 'mib', 'gib', 'tib', 'pib', 'eib']
DECIMAL_PREFIXES = ['b', 'k', 'm', 'g', 't', 'p', 'e', 'kb', 'mb', 'gb', 'tb', 'pb', 'eb']
VALID_PREFIXES = BINARY_PREFIXES + DECIMAL_PREFIXES

_UNIT_SIZES = {
    'ki': KIB, 'kib': KIB,
    'mi': MIB, 'mib': MIB,
    'gi': GIB, 'gib': GIB,
    'ti': TIB, 'tib': TIB,
    'pi': PIB, 'pib': PIB,
    'ei': EIB, 'eib': EIB,
    'k': KB, 'kb': KB,
    'm': MB, 'mb': MB,
    'g': GB, 'gb': GB,
    't': TB, 'tb': TB,
    'p': PB, 'pb': PB,
    'e': EB, 'eb': EB,
}


def bytes_in_unit(unit: str = 'B') -> int:
    return _UNIT_SIZES.get(unit.lower(), 1)


def convert_units(num: float,
                  src_unit: str,
                  dst_unit: str = 'B') -> float:
    """Returns a float representing the converted input in dst_units."""
    for unit in (src_unit, dst_unit):
        if unit.lower() not in VALID_PREFIXES:
            raise ValueError(f"{unit} not a valid unit, valid units are {VALID_PREFIXES}.")
    return (num * bytes_in_unit(src_unit)) / bytes_in_unit(dst_unit)


def parse_memory_string(string: str) -> Tuple[float, str]:
    """
    Given a string representation of some memory (i.e. '1024 Mib'), return the
    number and unit.

    >>> parse_memory_string('1024 Mib')
    (1024.0, 'Mib')
    >>> parse_memory_string('12')
    (12.0, 'b')
    """
    for i, character in enumerate(string):
        # find the first character of the unit
        if character not in '0123456789.-_ ':
            units = string[i:].strip()
            if units.lower() not in VALID_PREFIXES:
                raise ValueError(f"{units} not a valid unit, valid units are {VALID_PREFIXES}.")
            return float(string[:i]), units
    return float(string), 'b'


def human2bytes(string: str) -> int:
    """
    Given a string representation of some memory (i.e. '1024 Mib'), return the
    integer number of bytes.

    >>> human2bytes('64 MiB')
    67108864
    >>> human2bytes('1.5 k')
    1500
    """
    value, unit = parse_memory_string(string)
    if value < 0:
        raise ValueError(f"Negative size: {string}")
    return int(convert_units(value, src_unit=unit, dst_unit='b'))


def bytes2human(n: SupportsInt) -> str:
    """Return a binary value as a human readable string with units."""
    n = int(n)
    if n < 0:
        raise ValueError("n < 0")
    elif n < 1:
        return '0 b'

    power_level = math.floor(math.log(n, 1024))
    units = ('b', 'Ki', 'Mi', 'Gi', 'Ti', 'Pi', 'Ei')

    unit = units[power_level if power_level < len(units) else -1]
    value = convert_units(n, "b", unit)
    return f'{value:.1f} {unit}'


def strtobool(val: str) -> bool:
    """
    Make a string into a bool, accepting only the canonical spellings.

    Unlike the old distutils function of the same name, "yes", "on" and "1"
    are not booleans here: a flag that says "1" is a mistake we want to hear
    about.

    >>> strtobool('TRUE')
    True
    >>> strtobool('false')
    False
    >>> strtobool('yes')
    Traceback (most recent call last):
    ...
    ValueError: invalid truth value 'yes'
    """
    normalized = val.strip().lower()
    if normalized == 'true':
        return True
    elif normalized == 'false':
        return False
    raise ValueError(f"invalid truth value {val!r}")
