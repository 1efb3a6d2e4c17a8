"""
Tests for the multi-pattern scanner.

Covers leftmost-match selection, tie-breaking by matcher order, gap tokens,
normalization of matched tokens and the coverage guarantee.
"""

import pytest

from stringtok.exceptions import (
    InternalInvariantError,
    InvalidInputError,
    MatcherConfigurationError,
)
from stringtok.patterns import PatternMatcher, word, number, whitespace, punctuation
from stringtok.pipeline.normalizer import NORMALIZATIONS
from stringtok.scanner import classify_tokens, token_offsets
from stringtok.tokenizer import tokenize
from stringtok.types import MatchResult, Token

ZWSP = chr(0x200B)


def texts(tokens):
    return [t.text for t in tokens]


def types(tokens):
    return [t.type for t in tokens]


class TestEmptyInput:
    """Tests for empty and absent input."""

    def test_empty_string(self):
        """Empty string gives an empty stream."""
        assert classify_tokens("") == ()

    def test_none_is_empty(self):
        """None is treated as empty text."""
        assert classify_tokens(None) == ()

    def test_non_string_rejected(self):
        """Non-string input raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            classify_tokens(42)
        with pytest.raises(InvalidInputError):
            classify_tokens(b"bytes")


class TestSegmentation:
    """Tests for default matcher segmentation."""

    def test_sentence(self):
        """Words, punctuation and whitespace are classified in order."""
        tokens = classify_tokens("Hello, world!")

        assert texts(tokens) == ["Hello", ",", " ", "world", "!"]
        assert types(tokens) == ["word", "punctuation", "whitespace", "word", "punctuation"]

    def test_numbers(self):
        """Digit runs are numbers, separators are punctuation."""
        tokens = classify_tokens("10:30")

        assert texts(tokens) == ["10", ":", "30"]
        assert types(tokens) == ["number", "punctuation", "number"]

    def test_unicode_letters(self):
        """Letters and combining marks from any script form words."""
        tokens = classify_tokens("naïve Ελληνικά")

        assert texts(tokens) == ["naïve", " ", "Ελληνικά"]
        assert types(tokens) == ["word", "whitespace", "word"]

    def test_unmatched_text_is_unknown(self):
        """Text no matcher covers becomes a default-typed token."""
        tokens = classify_tokens("a$b")

        assert texts(tokens) == ["a", "$", "b"]
        assert types(tokens) == ["word", "unknown", "word"]

    def test_custom_default_type(self):
        """default_type labels gap tokens."""
        tokens = classify_tokens("a$b", default_type="other")

        assert tokens[1] == Token("$", "other")

    def test_trailing_gap(self):
        """A gap at the end of input becomes one token."""
        tokens = classify_tokens("ab", parsers={"number": number})

        assert tokens == (Token("ab", "unknown"),)

    def test_doubled_angle_brackets_are_punctuation(self):
        """<< and >> pairs count as punctuation."""
        tokens = classify_tokens("a<<b")

        assert texts(tokens) == ["a", "<<", "b"]
        assert types(tokens)[1] == "punctuation"

    def test_sub_matches_kept(self):
        """Capture groups are stored as sub-matches."""
        tokens = classify_tokens("a,")

        assert tokens[0].sub_matches == ()
        assert tokens[1].sub_matches == (",",)


class TestMatcherOrdering:
    """Tests for leftmost-match selection and tie-breaks."""

    def test_earliest_match_wins(self):
        """The match starting first is taken even if another matcher is listed first."""
        tokens = classify_tokens("12 ab", parsers={"word": word, "number": number})

        assert types(tokens) == ["number", "unknown", "word"]

    def test_tie_goes_to_first_listed(self):
        """Equal start offsets resolve to the earlier matcher."""
        first = classify_tokens("42", parsers=[("number", r"\d+"), ("word", r"\w+")])
        second = classify_tokens("42", parsers=[("word", r"\w+"), ("number", r"\d+")])

        assert types(first) == ["number"]
        assert types(second) == ["word"]

    def test_tie_break_is_deterministic(self):
        """Repeated scans with the same matcher order agree."""
        parsers = [("word", r"\w+"), ("number", r"\d+")]
        results = {classify_tokens("a1 2b 33", parsers=parsers) for _ in range(5)}

        assert len(results) == 1

    def test_matcher_token_type_overrides_name(self):
        """A matcher's own token_type replaces its registered name."""
        custom = PatternMatcher.compile(r"[a-z]+", token_type="word")
        tokens = classify_tokens("abc", parsers={"lower": custom})

        assert tokens == (Token("abc", "word"),)

    def test_shorter_match_at_same_offset_from_earlier_matcher(self):
        """Tie-break is by order, not by match length."""
        tokens = classify_tokens("abc", parsers=[("short", r"a"), ("long", r"abc")])

        assert texts(tokens) == ["a", "bc"]
        assert types(tokens) == ["short", "unknown"]


class TestAnchoredMatchers:
    """Tests for matchers anchored to the start of the remaining input."""

    def test_caret_anchors_at_cursor(self):
        """A ^-anchored matcher matches after the first token too."""
        tokens = classify_tokens("a,b", parsers=[("word", word), ("punctuation", r"^\p{P}")])

        assert texts(tokens) == ["a", ",", "b"]
        assert types(tokens) == ["word", "punctuation", "word"]

    def test_caret_matcher_in_tokenize(self):
        """Caller-supplied anchored punctuation survives filtering."""
        parsers = {"word": word, "whitespace": whitespace, "punctuation": r"^\p{P}"}
        result = tokenize(
            text="Hi, you!",
            include_punctuation=True,
            include_numbers=False,
            parsers=parsers,
        )

        assert result == ["Hi", ",", "you", "!"]

    def test_caret_does_not_match_ahead(self):
        """A ^-anchored matcher does not look past the cursor."""
        tokens = classify_tokens("ab,", parsers=[("punctuation", r"^\p{P}")])

        assert tokens == (Token("ab,", "unknown"),)

    def test_word_boundary_at_cursor(self):
        r"""\b treats the cursor as the start of the input."""
        tokens = classify_tokens("x1", parsers=[("x", r"x"), ("digit", r"\b\d")])

        assert types(tokens) == ["x", "digit"]


class TestZeroLengthMatches:
    """Tests for the zero-length match guard."""

    def test_empty_match_at_cursor_hides_later_match(self):
        """A matcher that matches empty at the cursor is skipped for that step."""
        tokens = classify_tokens("ab12", parsers={"digits": r"\d*"})

        assert tokens == (Token("ab12", "unknown"),)

    def test_zero_length_matcher_ignored(self):
        """A matcher that only matches empty strings never produces tokens."""
        tokens = classify_tokens("ab 12", parsers={"empty": r"x*", "word": word, "number": number})

        assert texts(tokens) == ["ab", " ", "12"]
        assert "empty" not in types(tokens)

    def test_only_zero_length_matcher(self):
        """With nothing but an empty matcher the whole input is one gap."""
        tokens = classify_tokens("abc", parsers={"empty": r"(?:)"})

        assert tokens == (Token("abc", "unknown"),)

    def test_stuck_matcher_raises(self):
        """A matcher that reports a match behind the cursor trips the step cap."""

        class StuckMatcher(PatternMatcher):
            def search(self, text, pos=0):
                return MatchResult(start=0, text=text[:1])

        with pytest.raises(InternalInvariantError):
            classify_tokens("ab", parsers={"stuck": StuckMatcher(None)})


class TestNormalization:
    """Tests for normalization of matched tokens."""

    def test_whitespace_collapsed(self):
        """Whitespace runs collapse to one space when normalizing."""
        tokens = classify_tokens("a \t\n b", normalize=True)

        assert texts(tokens) == ["a", " ", "b"]

    def test_normalization_off_by_default(self):
        """Without normalize the original text is kept."""
        tokens = classify_tokens("a \t\n b")

        assert texts(tokens) == ["a", " \t\n ", "b"]

    def test_normalization_does_not_shift_segmentation(self):
        """Cursor advances by the original match length."""
        plain = classify_tokens("one    two   three")
        normalized = classify_tokens("one    two   three", normalize=True)

        assert types(plain) == types(normalized)
        assert texts(normalized) == ["one", " ", "two", " ", "three"]

    def test_gap_tokens_not_normalized(self):
        """Default-typed gap tokens keep their original text."""
        tokens = classify_tokens("a" + ZWSP + ZWSP + "b", normalize=True)

        assert texts(tokens) == ["a", ZWSP + ZWSP, "b"]

    def test_custom_normalizations(self):
        """Caller-supplied rules are applied in order."""
        rules = [(r"o", "0"), (r"0+", "0")]
        tokens = classify_tokens("foo bar", normalize=True, normalizations=rules)

        assert texts(tokens) == ["f0", " ", "bar"]

    def test_default_rules_used(self):
        """The default normalization set is the module constant."""
        tokens = classify_tokens("x  y", normalize=True, normalizations=NORMALIZATIONS)

        assert texts(tokens) == ["x", " ", "y"]


class TestCoverage:
    """Tests for the coverage guarantee."""

    @pytest.mark.parametrize("text", [
        "Hello, world!",
        "  leading and trailing  ",
        "a$b%c^d",
        "10:30 on 2024-01-29, rock’n’roll!",
        "<<quoted>> «guillemets» “smart”",
        "tab\tnew\nline",
        "emoji 👍 and ZWJ",
        "$$$",
    ])
    def test_tokens_rebuild_input(self, text):
        """Concatenated token text equals the input."""
        tokens = classify_tokens(text)

        assert "".join(texts(tokens)) == text

    def test_no_empty_tokens(self):
        """Every token covers at least one character."""
        tokens = classify_tokens("a, b; c!")

        assert all(t.text for t in tokens)


class TestMatcherSetErrors:
    """Tests for unusable matcher sets."""

    def test_non_pattern_matcher(self):
        """A matcher that is not a pattern is rejected."""
        with pytest.raises(MatcherConfigurationError):
            classify_tokens("abc", parsers={"word": 123})

    def test_invalid_regex(self):
        """A pattern string that does not compile is rejected."""
        with pytest.raises(MatcherConfigurationError):
            classify_tokens("abc", parsers={"word": r"[a-"})

    def test_duplicate_names(self):
        """Duplicate names in a pair list are rejected."""
        with pytest.raises(MatcherConfigurationError):
            classify_tokens("abc", parsers=[("word", word), ("word", whitespace)])

    def test_not_a_matcher_set(self):
        """Something that is neither a mapping nor pairs is rejected."""
        with pytest.raises(MatcherConfigurationError):
            classify_tokens("abc", parsers=[punctuation])


class TestTokenOffsets:
    """Tests for offset reconstruction."""

    def test_offsets(self):
        """Offsets accumulate token lengths."""
        tokens = classify_tokens("ab cd")

        assert list(token_offsets(tokens)) == [(0, 2), (2, 3), (3, 5)]

    def test_offsets_slice_input(self):
        """Offsets index back into the original string."""
        text = "Hello, world!"
        tokens = classify_tokens(text)

        for token, (start, end) in zip(tokens, token_offsets(tokens)):
            assert text[start:end] == token.text
