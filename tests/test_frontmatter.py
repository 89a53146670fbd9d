# tests/test_frontmatter.py
"""Tests for front matter parsing and metadata stripping."""

import pytest

from llmstxt.core.frontmatter import (
    coerce_flag,
    coerce_position,
    parse_front_matter,
    split_front_matter,
    strip_metadata,
)
from llmstxt.core.models import FrontMatter


class TestStripMetadata:

    def test_removes_block_and_trailing_blank_lines(self):
        raw = "---\nsidebar_position: 1\n---\n\n\n# Title\nBody text\n"
        assert strip_metadata(raw) == "# Title\nBody text"

    def test_text_without_block_is_only_trimmed(self):
        raw = "\n\n# No Frontmatter\nSimple content  \n\n"
        assert strip_metadata(raw) == "# No Frontmatter\nSimple content"

    def test_unclosed_block_is_left_in_place(self):
        raw = "---\nsidebar_position: 1\n# Title"
        assert strip_metadata(raw) == raw

    def test_block_must_start_on_first_line(self):
        raw = "Intro\n---\ndraft: true\n---\nMore"
        assert strip_metadata(raw) == raw

    def test_malformed_values_are_still_stripped(self):
        raw = '---\nsidebar_position: "not a number"\ndraft: [unclosed\n---\n# Invalid\nContent'
        assert strip_metadata(raw) == "# Invalid\nContent"

    def test_crlf_line_endings(self):
        raw = "---\r\ndraft: true\r\n---\r\n\r\n# Title\r\nBody"
        assert strip_metadata(raw) == "# Title\r\nBody"

    def test_horizontal_rules_in_body_are_kept(self):
        raw = "---\nhidden: false\n---\nBefore\n\n---\n\nAfter"
        assert strip_metadata(raw) == "Before\n\n---\n\nAfter"

    def test_empty_block(self):
        assert strip_metadata("---\n---\n") == ""


class TestParseFrontMatter:

    def test_no_block_returns_none(self):
        assert parse_front_matter("# Just a heading") is None

    def test_typed_fields(self):
        fm = parse_front_matter("---\nsidebar_position: 4\ndraft: true\ntitle: Intro\n---\nbody")
        assert fm == FrontMatter(sidebar_position=4, draft=True, extra={"title": "Intro"})

    def test_non_numeric_position_is_absent(self):
        fm = parse_front_matter('---\nsidebar_position: "not a number"\n---\nbody')
        assert fm is not None
        assert fm.sidebar_position is None

    def test_numeric_string_position_is_parsed(self):
        fm = parse_front_matter("---\nsidebar_position: '7'\n---\nbody")
        assert fm.sidebar_position == 7

    def test_string_and_yaml11_flags(self):
        fm = parse_front_matter("---\nhidden: 'TRUE'\nunlisted: yes\ndraft: 'no'\n---\n")
        assert fm.hidden is True
        assert fm.unlisted is True
        assert fm.draft is False

    def test_invalid_yaml_yields_empty_front_matter(self):
        fm = parse_front_matter("---\nsidebar_position: [1\n---\nbody")
        assert fm == FrontMatter()

    def test_scalar_block_yields_empty_front_matter(self):
        assert parse_front_matter("---\njust a string\n---\nbody") == FrontMatter()

    def test_split_returns_block_and_remainder(self):
        assert split_front_matter("---\na: 1\n---\nrest") == ("a: 1\n", "rest")


@pytest.mark.parametrize("value, expected", [
    (3, 3),
    (0, 0),
    (-2, -2),
    (2.0, 2),
    (2.5, None),
    (" 5 ", 5),
    ("abc", None),
    (True, None),
    (None, None),
    ([1], None),
])
def test_coerce_position(value, expected):
    assert coerce_position(value) == expected


@pytest.mark.parametrize("value, expected", [
    (True, True),
    (False, False),
    ("true", True),
    ("On", True),
    ("1", True),
    ("false", False),
    ("", False),
    (1, True),
    (0, False),
    (None, False),
])
def test_coerce_flag(value, expected):
    assert coerce_flag(value) is expected


class TestRecoverKnownKeys:
    """A block PyYAML rejects still yields the recognised keys on its good lines."""

    def test_hidden_survives_colon_in_title(self):
        fm = parse_front_matter("---\ntitle: Setup: Linux\nsidebar_position: 2\nhidden: true\n---\nSECRET")
        assert fm.hidden is True
        assert fm.sidebar_position == 2

    def test_draft_survives_colon_in_description(self):
        fm = parse_front_matter("---\ndescription: Note: wip\ndraft: true\n---\nDRAFT")
        assert fm.draft is True

    def test_unlisted_and_string_flags_are_recovered(self):
        fm = parse_front_matter("---\ntitle: A: B\nunlisted: 'yes'\n---\nbody")
        assert fm.unlisted is True

    def test_bad_known_key_line_is_dropped_alone(self):
        fm = parse_front_matter("---\ntitle: A: B\nsidebar_position: [3\nhidden: true\n---\nbody")
        assert fm.sidebar_position is None
        assert fm.hidden is True

    def test_nested_keys_are_not_recovered(self):
        fm = parse_front_matter("---\ntitle: A: B\nmeta:\n  hidden: true\n---\nbody")
        assert fm.hidden is False
