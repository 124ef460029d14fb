import logging
import re

from hrcache.cache import Exact, Pattern
from hrcache.utils.exceptions import MalformedPatternError


class TestExact:
    def test_matches_only_equal_key(self):
        selector = Exact("/api/employees")
        assert selector.matches("/api/employees")
        assert not selector.matches("/api/employees?page=1")

    def test_str_is_key(self):
        assert str(Exact("user:1")) == "user:1"


class TestPattern:
    def test_search_semantics(self):
        selector = Pattern.compile("employees")
        assert selector.matches("/api/employees?page=1")
        assert not selector.matches("/api/departments")

    def test_anchored(self):
        selector = Pattern.compile("^user:")
        assert selector.matches("user:1")
        assert not selector.matches("order:user:1")

    def test_flags(self):
        assert Pattern.compile("^user:", re.IGNORECASE).matches("USER:1")

    def test_from_compiled_regex(self):
        regex = re.compile(r"^/api/devices/\d+$")
        selector = Pattern.compile(regex)
        assert selector.regex is regex
        assert selector.source == regex.pattern
        assert selector.matches("/api/devices/12")

    def test_malformed_pattern(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hrcache.cache.selectors"):
            selector = Pattern.compile("[unclosed")

        assert selector.regex is None
        assert isinstance(selector.error, MalformedPatternError)
        assert selector.error.source == "[unclosed"
        assert not selector.matches("[unclosed")
        assert "match no keys" in caplog.text

    def test_equality_by_source_and_flags(self):
        assert Pattern.compile("^a") == Pattern.compile("^a")
        assert Pattern.compile("^a") != Pattern.compile("^a", re.IGNORECASE)
        assert Pattern.compile("^a") != Exact("^a")

    def test_str(self):
        assert str(Pattern.compile("^user:")) == "/^user:/"

    def test_direct_construction_compiles(self):
        selector = Pattern("^user:")
        assert selector.error is None
        assert selector.matches("user:1")
        assert selector == Pattern.compile("^user:")

    def test_direct_construction_malformed(self):
        selector = Pattern("user:(")
        assert isinstance(selector.error, MalformedPatternError)
        assert not selector.matches("user:(")

    def test_invalid_flag_combination(self):
        selector = Pattern.compile("^user:", re.LOCALE)
        assert isinstance(selector.error, MalformedPatternError)
        assert not selector.matches("user:1")

    def test_bytes_source_is_malformed(self):
        selector = Pattern.compile(b"^user:")
        assert selector.regex is None
        assert isinstance(selector.error, MalformedPatternError)
        assert not selector.matches("user:1")

    def test_bytes_regex_is_malformed(self):
        selector = Pattern.compile(re.compile(b"^user:"))
        assert selector.regex is None
        assert selector.error.source == b"^user:"
        assert not selector.matches("user:1")
