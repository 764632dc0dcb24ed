"""
Example value generators for pattern matchers.

Every generator takes a seeded ``random.Random`` and returns a string that
fully matches the regular expression of the kind it is registered for.
Stubs use these values so that generated responses contain realistic data
instead of regex text.
"""

import random
import string
import uuid
import zlib
from collections.abc import Callable
from datetime import date, timedelta

import rstr

ExampleGenerator = Callable[[random.Random], str]

_EPOCH = date(2000, 1, 1)
_DAY_SPAN = 365 * 30


def _word(rng: random.Random, alphabet: str = string.ascii_letters, low: int = 5, high: int = 12) -> str:
    return "".join(rng.choice(alphabet) for _ in range(rng.randint(low, high)))


def _date(rng: random.Random) -> str:
    return (_EPOCH + timedelta(days=rng.randint(0, _DAY_SPAN))).isoformat()


def _time(rng: random.Random) -> str:
    return f"{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}:{rng.randint(0, 59):02d}"


def non_blank_string(rng: random.Random) -> str:
    return _word(rng)


def any_boolean(rng: random.Random) -> str:
    return rng.choice(["true", "false"])


def any_number(rng: random.Random) -> str:
    if rng.random() < 0.5:
        return str(rng.randint(0, 100_000))
    return any_double(rng)


def any_integer(rng: random.Random) -> str:
    return str(rng.randint(-100_000, 100_000))


def any_positive_int(rng: random.Random) -> str:
    return str(rng.randint(1, 100_000))


def any_double(rng: random.Random) -> str:
    return f"{rng.uniform(0, 10_000):.2f}"


def any_hex(rng: random.Random) -> str:
    return _word(rng, alphabet="0123456789abcdef", low=4, high=16)


def any_alpha_numeric(rng: random.Random) -> str:
    return _word(rng, alphabet=string.ascii_letters + string.digits)


def any_alpha_unicode(rng: random.Random) -> str:
    return _word(rng, alphabet=string.ascii_letters + "ąćęłńóśźżäöüßéèç")


def any_url(rng: random.Random) -> str:
    return f"{rng.choice(['http', 'https'])}://{_word(rng, string.ascii_lowercase)}.example.com/{_word(rng, string.ascii_lowercase)}"


def any_https_url(rng: random.Random) -> str:
    return f"https://{_word(rng, string.ascii_lowercase)}.example.com/{_word(rng, string.ascii_lowercase)}"


def any_hostname(rng: random.Random) -> str:
    return f"https://{_word(rng, string.ascii_lowercase)}.com"


def any_ip_address(rng: random.Random) -> str:
    return ".".join(str(rng.randint(0, 255)) for _ in range(4))


def any_email(rng: random.Random) -> str:
    return f"{_word(rng, string.ascii_lowercase)}@{_word(rng, string.ascii_lowercase)}.com"


def any_uuid(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def any_date(rng: random.Random) -> str:
    return _date(rng)


def any_time(rng: random.Random) -> str:
    return _time(rng)


def any_date_time(rng: random.Random) -> str:
    return f"{_date(rng)}T{_time(rng)}"


def iso8601_with_offset(rng: random.Random) -> str:
    offset = rng.choice(["Z", "+01:00", "-05:00", "+05:30"])
    return f"{any_date_time(rng)}.{rng.randint(0, 999):03d}{offset}"


def xeger(pattern: str, rng: random.Random) -> str:
    """Generate a string matching an arbitrary regular expression."""
    return rstr.Rstr(rng).xeger(pattern)


def derive_seed(seed: int, location: str) -> int:
    """Stable per-location seed: the same location always yields the same example."""
    return seed ^ zlib.crc32(location.encode("utf-8"))
