"""
Canonical regular expressions backing the named pattern kinds.

All expressions are written for ``re.fullmatch``; anchors are not required.
"""

NON_EMPTY = r"[\S\s]+"
NON_BLANK = r"^\s*\S[\S\s]*"
ANY_STRING = r"[\S\s]*"

TRUE_OR_FALSE = r"(true|false)"

NUMBER = r"-?(\d*\.\d+|\d+)"
INTEGER = r"-?(\d+)"
POSITIVE_INT = r"([1-9]\d*)"
DOUBLE = r"-?(\d*\.\d+)"
HEX = r"[a-fA-F0-9]+"

ALPHA_NUMERIC = r"[a-zA-Z0-9]+"
ONLY_ALPHA_UNICODE = r"[^\W\d_]+"

_IP_OCTET = r"(25[0-5]|2[0-4]\d|[01]?\d\d?)"
IP_ADDRESS = r"\.".join([_IP_OCTET] * 4)

HOSTNAME = r"((http[s]?|ftp):/)/?([^:/\s]+)(:[0-9]{1,5})?"
URL = r"(ftp|http|https)://[\w.-]+(:\d{1,5})?(/[\w\-./?%&=]*)?"
HTTPS_URL = r"https://[\w.-]+(:\d{1,5})?(/[\w\-./?%&=]*)?"
EMAIL = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,6}"

UUID = r"[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}"

ANY_DATE = r"(\d\d\d\d)-(0[1-9]|1[012])-(0[1-9]|[12][0-9]|3[01])"
ANY_TIME = r"(2[0-3]|[01][0-9]):([0-5][0-9]):([0-5][0-9])"
ANY_DATE_TIME = ANY_DATE + "T" + ANY_TIME
ISO8601_WITH_OFFSET = ANY_DATE_TIME + r"(\.\d+)?(Z|[+-][01]\d:[0-5]\d)"
