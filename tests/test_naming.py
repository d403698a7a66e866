"""
Tests for snake_case to PascalCase conversion.
"""

import pytest

from sqlstruct.normalization.naming import (
    DEFAULT_NAME_OVERRIDES,
    UPPER_WORDS,
    NameTransformer,
    camel_case,
    capitalize_first,
    title,
)


class TestTitle:

    @pytest.mark.parametrize("word", UPPER_WORDS)
    def test_acronyms_are_upper_cased(self, word):
        assert title(word) == word.upper()

    @pytest.mark.parametrize("word, expected", [
        ("ips", "IPs"),
        ("mysql", "MySQL"),
        ("sqlite", "SQLite"),
        ("userid", "UserID"),
    ])
    def test_special_spellings(self, word, expected):
        assert title(word) == expected

    def test_default_capitalizes_first_letter_only(self):
        assert title("abc") == "Abc"
        assert title("aBC") == "ABC"

    def test_overrides_are_case_sensitive(self):
        assert title("Id") == "Id"

    def test_digits_first(self):
        assert capitalize_first("2fa") == "2fa"
        assert title("") == ""


class TestCamelCase:

    def test_empty(self):
        assert camel_case("") == ""

    def test_single_word(self):
        assert camel_case("name") == "Name"

    def test_single_acronym(self):
        assert camel_case("id") == "ID"

    @pytest.mark.parametrize("identifier, expected", [
        ("user_id", "UserID"),
        ("sso_uuid", "SSOUUID"),
        ("created_at", "CreatedAt"),
        ("device_os_info", "DeviceOSInfo"),
        ("mysql_ips", "MySQLIPs"),
        ("file_sha256", "FileSHA256"),
        ("userid_map", "UserIDMap"),
    ])
    def test_words_are_joined(self, identifier, expected):
        assert camel_case(identifier) == expected

    def test_empty_segments_are_dropped(self):
        assert camel_case("_name") == "Name"
        assert camel_case("a__b") == "AB"

    def test_deterministic(self):
        assert camel_case("ldap_dn") == camel_case("ldap_dn") == "LDAPDN"


class TestNameTransformer:

    def test_default_overrides_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_NAME_OVERRIDES["id"] = "Id"

    def test_extra_overrides_layer_on_defaults(self):
        transformer = NameTransformer({"api": "API", "oauth": "OAuth"})
        assert transformer.camel_case("oauth_api_id") == "OAuthAPIID"

    def test_extra_overrides_do_not_leak(self):
        NameTransformer({"api": "API"})
        assert "api" not in DEFAULT_NAME_OVERRIDES
        assert camel_case("api_key") == "ApiKey"

    def test_extra_override_replaces_builtin(self):
        transformer = NameTransformer({"id": "Id"})
        assert transformer.camel_case("user_id") == "UserId"
        assert camel_case("user_id") == "UserID"
