"""
Identifier casing: snake_case SQL names to PascalCase Go names.

Each underscore-separated word is looked up in an override dictionary
first (acronyms, brand spellings); words not in the dictionary get their
first letter uppercased and are otherwise left alone.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

# Words rendered fully upper-case
UPPER_WORDS = (
    "id", "dns", "uuid", "ldap", "ad", "dn", "sha256",
    "md5", "sso", "otp", "totp", "os", "sdk", "ipa",
)

_SPECIAL_WORDS = {
    "ips": "IPs",
    "mysql": "MySQL",
    "sqlite": "SQLite",
    "userid": "UserID",
}


def _build_overrides(extra: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    overrides: Dict[str, str] = dict(_SPECIAL_WORDS)
    for word in UPPER_WORDS:
        overrides[word] = word.upper()
    if extra:
        overrides.update(extra)
    return MappingProxyType(overrides)


DEFAULT_NAME_OVERRIDES = _build_overrides()


def capitalize_first(word: str) -> str:
    """Uppercase the first character only; 'abc' -> 'Abc', 'aBC' -> 'ABC'."""
    return word[:1].upper() + word[1:]


class NameTransformer:
    """Applies the override dictionary and default title-casing."""

    def __init__(self, extra_overrides: Optional[Mapping[str, str]] = None):
        if extra_overrides:
            self.overrides = _build_overrides(extra_overrides)
        else:
            self.overrides = DEFAULT_NAME_OVERRIDES

    def title(self, word: str) -> str:
        override = self.overrides.get(word)
        if override is not None:
            return override
        return capitalize_first(word)

    def camel_case(self, identifier: str) -> str:
        """Convert a snake_case identifier, e.g. 'user_id' -> 'UserID'."""
        if not identifier:
            return ""

        parts = identifier.split("_")
        if len(parts) == 1:
            return self.title(identifier)

        return "".join(self.title(part) for part in parts)


_default_transformer = NameTransformer()


def title(word: str) -> str:
    """Title-case a single word using the built-in overrides."""
    return _default_transformer.title(word)


def camel_case(identifier: str) -> str:
    """Convert a snake_case identifier using the built-in overrides."""
    return _default_transformer.camel_case(identifier)
