"""Unit tests for text normalization.

Tests the TextNormalizer service for:
- Lower-casing and whitespace collapsing
- Canonical spellings of technology names
- Idempotence
- Empty input handling
"""

import re

import pytest

from app.normalization import ALIAS_RULES, TextNormalizer, normalize_text


@pytest.fixture
def normalizer():
    """Create a TextNormalizer with the default rules."""
    return TextNormalizer()


class TestBasicNormalization:
    """Tests for case and whitespace handling."""

    def test_lower_cases(self, normalizer):
        assert normalizer.normalize("Python And SQL") == "python and sql"

    def test_collapses_whitespace_runs(self, normalizer):
        assert normalizer.normalize("python\t\t and \n\n sql") == "python and sql"

    def test_trims(self, normalizer):
        assert normalizer.normalize("   python   ") == "python"

    @pytest.mark.parametrize("value", ["", None, "   ", "\n\t"])
    def test_empty_input(self, normalizer, value):
        assert normalizer.normalize(value) == ""

    def test_keeps_punctuation(self, normalizer):
        """Punctuation is removed by the tokenizer, not the normalizer."""
        assert normalizer.normalize("React, SQL.") == "react, sql."


class TestAliasRules:
    """Tests for canonical technology spellings."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Node.JS", "nodejs"),
            ("nodejs", "nodejs"),
            ("NodeJS", "nodejs"),
            ("node.js", "nodejs"),
            ("React.js", "react"),
            ("ReactJS", "react"),
            ("Vue.js", "vue"),
            ("AngularJS", "angular"),
            ("RESTful APIs", "restful"),
            ("restful api", "restful"),
            ("CI/CD", "cicd"),
            ("ci-cd", "cicd"),
            ("CI CD", "cicd"),
            ("Google Cloud Platform", "gcp"),
            ("Amazon Web Services", "aws"),
            ("AWS Cloud", "aws"),
            ("Tailwind CSS", "tailwind"),
            ("HTML5", "html"),
            ("CSS3", "css"),
        ],
    )
    def test_variants_collapse(self, normalizer, raw, expected):
        assert normalizer.normalize(raw) == expected

    def test_node_variants_share_canonical_form(self, normalizer):
        forms = {normalizer.normalize(v) for v in ("Node.JS", "nodejs", "NodeJS")}
        assert forms == {"nodejs"}

    def test_aliases_inside_sentences(self, normalizer):
        result = normalizer.normalize("Built APIs with Node.js and React.js on Amazon  Web Services")
        assert result == "built apis with nodejs and react on aws"

    def test_multiword_alias_across_line_break(self, normalizer):
        assert normalizer.normalize("Google\nCloud   Platform") == "gcp"

    def test_word_boundaries_respected(self, normalizer):
        """Longer words that merely contain an alias are left alone."""
        assert normalizer.normalize("xhtml5 html55 preactjs") == "xhtml5 html55 preactjs"

    def test_alias_followed_by_punctuation(self, normalizer):
        assert normalizer.normalize("Node.js, React.js.") == "nodejs, react."

    def test_nested_alias_reaches_fixed_point(self, normalizer):
        assert normalizer.normalize("react.js.js") == "react"

    def test_custom_rules(self):
        normalizer = TextNormalizer(rules=[(re.compile(r"\bk8s\b"), "kubernetes")])
        assert normalizer.normalize("K8s and Node.js") == "kubernetes and node.js"

    def test_default_rules_are_immutable(self):
        assert isinstance(ALIAS_RULES, tuple)


class TestIdempotence:
    """normalize(normalize(s)) == normalize(s)."""

    @pytest.mark.parametrize(
        "raw",
        [
            "Experienced in React and Node.js development, strong in SQL",
            "Looking for React, Node.js, SQL skills",
            "CI / CD  with  AWS cloud and GOOGLE CLOUD PLATFORM",
            "react.js.js node.js.js",
            "  HTML5/CSS3\tTailwind   CSS  ",
            "RESTful APIs, restful api, REST",
            "",
        ],
    )
    def test_idempotent(self, normalizer, raw):
        once = normalizer.normalize(raw)
        assert normalizer.normalize(once) == once

    @pytest.mark.parametrize("raw", ["A  B", "Node.JS\n\nReact", "x \t y"])
    def test_output_invariants(self, normalizer, raw):
        result = normalizer.normalize(raw)
        assert "  " not in result
        assert result == result.lower()
        assert result == result.strip()


def test_normalize_text_uses_default_rules():
    assert normalize_text("Node.JS  and ReactJS") == "nodejs and react"
