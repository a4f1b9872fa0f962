"""
Pricing configuration loaded from a key=value properties source.

The bundled default lives at cinema_tickets/resources/prices.properties;
PRICES_FILE overrides it. Streams can be supplied directly, which skips
the file lookup but applies the same checks.
"""

import os
import re
import string
from typing import IO, Optional

from cinema_tickets.core.config import get_settings
from cinema_tickets.core.exceptions import ConfigurationError
from cinema_tickets.core.logging import get_logger
from cinema_tickets.schemas.ticket import PricingConfig
from cinema_tickets.services.interfaces.config_loader import ConfigurationLoader

logger = get_logger(__name__)

ADULT_PRICE_KEY = "adult.ticket.price"
CHILD_PRICE_KEY = "child.ticket.price"
REQUIRED_KEYS = (ADULT_PRICE_KEY, CHILD_PRICE_KEY)

COMMENT_PREFIXES = ("#", "!")
SEPARATORS = ("=", ":")
ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
HEX_DIGITS = frozenset(string.hexdigits)
LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Properties files are ISO-8859-1; every byte decodes
SOURCE_ENCODING = "latin-1"


def _continues(line: str) -> bool:
    """An odd run of trailing backslashes joins the next line."""
    return (len(line) - len(line.rstrip("\\"))) % 2 == 1


def _logical_lines(text: str):
    pending = None
    for raw_line in LINE_BREAK.split(text):
        line = raw_line.lstrip()
        if pending is None and (not line or line.startswith(COMMENT_PREFIXES)):
            continue
        if _continues(line):
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending is not None:
        yield pending


def _unescape(text: str) -> str:
    chars = []
    index = 0
    while index < len(text):
        char = text[index]
        index += 1
        if char != "\\":
            chars.append(char)
            continue
        if index == len(text):
            break
        char = text[index]
        index += 1
        if char == "u":
            digits = text[index:index + 4]
            if len(digits) != 4 or not HEX_DIGITS.issuperset(digits):
                raise ValueError("Malformed \\uxxxx encoding.")
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(ESCAPES.get(char, char))
    return "".join(chars)


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse properties text into a dict, following java.util.Properties.

    The first unescaped '=', ':' or whitespace splits key from value. A line
    with no separator is a key with an empty value. A trailing backslash
    continues onto the next line, and backslash escapes (including \\uXXXX)
    are decoded in keys and values. Later keys win.

    Raises:
        ValueError: malformed \\uXXXX escape
    """
    properties = {}
    for line in _logical_lines(text):
        split_at = 0
        while split_at < len(line):
            char = line[split_at]
            if char == "\\":
                split_at += 2
                continue
            if char in SEPARATORS or char.isspace():
                break
            split_at += 1

        value = line[split_at:].lstrip()
        if value[:1] in SEPARATORS:
            value = value[1:].lstrip()
        properties[_unescape(line[:split_at])] = _unescape(value)
    return properties


class DefaultConfigurationLoader(ConfigurationLoader):

    def __init__(self, path: Optional[str] = None):
        self.path = path or get_settings().PRICES_FILE

    def load(self) -> PricingConfig:
        if not os.path.isfile(self.path):
            logger.error("configuration_file_not_found", path=self.path)
            raise ConfigurationError(
                f"Configuration file not found: {os.path.basename(self.path)}"
            )

        try:
            with open(self.path, "rb") as f:
                content = f.read()
        except OSError as e:
            logger.error("configuration_read_failed", path=self.path, error=str(e))
            raise ConfigurationError(
                "Failed to load ticket prices from configuration"
            ) from e

        return self._to_pricing(
            self._parse(content, "Failed to load ticket prices from configuration")
        )

    def load_from_stream(self, stream: Optional[IO]) -> PricingConfig:
        return self._to_pricing(self.load_properties(stream))

    def load_properties(self, stream: Optional[IO]) -> dict[str, str]:
        """Read and validate raw properties from a byte or text stream."""
        if stream is None:
            raise ConfigurationError("Input stream for configuration file is null.")

        try:
            content = stream.read()
        except OSError as e:
            logger.error("configuration_read_failed", error=str(e))
            raise ConfigurationError(
                "Failed to load ticket prices from input stream"
            ) from e

        return self._parse(content, "Failed to load ticket prices from input stream")

    def _parse(self, content, failure_message: str) -> dict[str, str]:
        if isinstance(content, bytes):
            content = content.decode(SOURCE_ENCODING)
        try:
            properties = parse_properties(content)
        except ValueError as e:
            logger.error("configuration_malformed", error=str(e))
            raise ConfigurationError(failure_message) from e
        return self._validate(properties)

    def _validate(self, properties: dict[str, str]) -> dict[str, str]:
        if not properties:
            raise ConfigurationError("Properties file is empty or could not be loaded.")

        for key in REQUIRED_KEYS:
            if not properties.get(key):
                logger.error("configuration_missing_key", key=key)
                raise ConfigurationError(f"Missing configuration key: {key}")
        return properties

    def _to_pricing(self, properties: dict[str, str]) -> PricingConfig:
        prices = {}
        for field, key in (("adult_price", ADULT_PRICE_KEY), ("child_price", CHILD_PRICE_KEY)):
            try:
                prices[field] = int(properties[key])
            except ValueError as e:
                raise ConfigurationError(f"Invalid value for configuration key: {key}") from e
        return PricingConfig(**prices)
