"""
Tests for level labels and rendered-line inspection.
"""

import pytest
from ff_loggy import Level, check_level, level_label, parse_level
from ff_loggy.utils import merge_attributes


class TestCheckLevel:
    """Test level marker detection in rendered lines."""

    @pytest.mark.parametrize(
        "level,label",
        [
            (Level.DEBUG, "DEBUG"),
            (Level.INFO, "INFO"),
            (Level.WARN, "WARN"),
            (Level.ERROR, "ERROR"),
        ],
    )
    def test_text_marker(self, level, label):
        """Text lines carry level=LABEL."""
        assert check_level(f'level={label} msg="hello"\n', level)

    @pytest.mark.parametrize(
        "level,label",
        [
            (Level.DEBUG, "DEBUG"),
            (Level.INFO, "INFO"),
            (Level.WARN, "WARN"),
            (Level.ERROR, "ERROR"),
        ],
    )
    def test_json_marker(self, level, label):
        """JSON lines carry "level":"LABEL"."""
        assert check_level(f'{{"level":"{label}","msg":"hello"}}\n', level)

    def test_other_level_does_not_match(self):
        """A line at one level does not match another."""
        line = 'level=WARN msg="hello"\n'
        assert not check_level(line, Level.ERROR)
        assert not check_level(line, Level.INFO)

    def test_unrecognised_encodings(self):
        """Quoted text values and spaced JSON are not recognised."""
        assert not check_level('level="INFO" msg=hello', Level.INFO)
        assert not check_level('{"level": "INFO", "msg": "hello"}', Level.INFO)
        assert not check_level("INFO hello", Level.INFO)

    def test_case_sensitive(self):
        """Markers are matched exactly as rendered."""
        assert not check_level("level=info msg=hello", Level.INFO)

    def test_marker_anywhere_in_line(self):
        """Matching is a substring search, so markers in messages also count."""
        assert check_level('level=INFO msg="saw level=ERROR upstream"', Level.ERROR)


class TestLevels:
    """Test level labels and parsing."""

    def test_named_labels(self):
        assert level_label(Level.DEBUG) == "DEBUG"
        assert level_label(Level.INFO) == "INFO"
        assert level_label(Level.WARN) == "WARN"
        assert level_label(Level.ERROR) == "ERROR"

    def test_warning_is_warn(self):
        """WARNING is an alias, rendered as WARN."""
        assert Level.WARNING is Level.WARN
        assert level_label(Level.WARNING) == "WARN"

    def test_in_between_labels(self):
        """Unnamed levels render relative to the named level below."""
        assert level_label(22) == "INFO+2"
        assert level_label(39) == "WARN+9"
        assert level_label(45) == "ERROR+5"
        assert level_label(5) == "DEBUG-5"

    def test_parse_names(self):
        assert parse_level("debug") == Level.DEBUG
        assert parse_level("INFO") == Level.INFO
        assert parse_level("warn") == Level.WARN
        assert parse_level("Warning") == Level.WARN
        assert parse_level(" error ") == Level.ERROR

    def test_parse_numbers(self):
        assert parse_level("25") == 25
        assert parse_level(35) == 35

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            parse_level("verbose")


class TestMergeAttributes:
    """Test merging attributes under group paths."""

    def test_top_level(self):
        assert merge_attributes({"a": 1}, (), {"b": 2}) == {"a": 1, "b": 2}

    def test_nested(self):
        merged = merge_attributes({"a": 1}, ("g", "h"), {"b": 2})
        assert merged == {"a": 1, "g": {"h": {"b": 2}}}

    def test_existing_group_extended(self):
        merged = merge_attributes({"g": {"b": 2}}, ("g",), {"c": 3})
        assert merged == {"g": {"b": 2, "c": 3}}

    def test_base_not_mutated(self):
        base = {"g": {"b": 2}}
        merge_attributes(base, ("g",), {"c": 3})
        assert base == {"g": {"b": 2}}
