"""Best-effort parsing of database connection strings.

Two forms are recognized:
- MongoDB URLs (mongodb://... or mongodb+srv://...), returned unchanged
- semicolon separated key=value pairs (Server=localhost;Database=test)

This is not a full connection string grammar: no escaping, no quoted values.
"""

import re


ConnectionDescriptor = dict[str, str]

MONGODB_SCHEMES = ("mongodb", "mongodb+srv")

# scheme followed by "://", as in RFC 3986
URL_PATTERN = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*)://")


def UrlScheme(text: str) -> str:
    """Return the lowercase URL scheme of the text, or an empty string if it is not URL-form."""
    match = URL_PATTERN.match(text.strip())
    return match.group("scheme").lower() if match else ""


def IsMongoURL(text: str) -> bool:
    return UrlScheme(text) in MONGODB_SCHEMES


def ParseKeyValuePairs(text: str) -> ConnectionDescriptor:
    """Split "key=value;key=value" into a dictionary, trimming whitespace.
    Segments without "=" or with an empty key or value are dropped.
    When a key is repeated, the last value wins.
    """

    pairs: ConnectionDescriptor = {}
    for segment in text.split(";"):
        key, sep, value = segment.partition("=")
        key, value = key.strip(), value.strip()
        if sep and key and value:
            pairs[key] = value
    return pairs


def ParseConnectionString(text: str) -> ConnectionDescriptor:
    """Decode a connection string into a dictionary describing the connection."""

    if IsMongoURL(text):
        return {"type": "mongodb", "url": text}
    return ParseKeyValuePairs(text)
