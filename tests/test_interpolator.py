"""Tests for runtime.interpolator: placeholder substitution in both output modes."""

from dataclasses import dataclass

from hypothesis import given
from hypothesis import strategies as st

from keytranslate.runtime.interpolator import interpolate, scan_template
from keytranslate.store.nodes import Template


@dataclass(frozen=True)
class Bold:
    """Opaque UI fragment stand-in."""

    text: str

    def __str__(self) -> str:
        return f"<b>{self.text}</b>"


# Literal text without braces, so generated templates contain exactly the
# placeholders the test inserts.
literal_text = st.text(
    alphabet=st.characters(exclude_characters="{}", exclude_categories=("Cs",)),
    max_size=12,
)
names = st.sampled_from(["name", "count", "n", "who", "place"])


@st.composite
def templates_with_args(draw: st.DrawFn) -> tuple[str, dict[str, object], int]:
    """Template text, named args and the number of placeholders."""
    tokens = draw(st.lists(names, max_size=6))
    literals = draw(st.lists(literal_text, min_size=len(tokens) + 1, max_size=len(tokens) + 1))
    text = literals[0] + "".join(
        f"{{{token}}}{literal}" for token, literal in zip(tokens, literals[1:], strict=True)
    )
    args = draw(
        st.dictionaries(names, st.one_of(st.integers(), literal_text, st.builds(Bold, literal_text)))
    )
    return text, args, len(tokens)


# ============================================================================
# SCANNING
# ============================================================================


class TestScanTemplate:
    """Splitting at placeholder boundaries."""

    def test_literals_surround_tokens(self) -> None:
        """Leading/trailing literals are kept as empty strings."""
        assert scan_template("{count} items in {0}") == (("", " items in ", ""), ("count", "0"))

    def test_no_tokens(self) -> None:
        """Plain text is one literal."""
        assert scan_template("Nothing here") == (("Nothing here",), ())

    def test_alias_span_is_literal(self) -> None:
        """{{key}} is never a placeholder."""
        assert scan_template("Help: {{support}}") == (("Help: {{support}}",), ())

    def test_non_token_braces_are_literal(self) -> None:
        """Braces around non-identifiers are ordinary text."""
        assert scan_template("{ spaced } {-1} {}") == (("{ spaced } {-1} {}",), ())


# ============================================================================
# STRING MODE
# ============================================================================


class TestStringMode:
    """Default output: a single string."""

    def test_named(self) -> None:
        """Named tokens use the args mapping."""
        assert interpolate("Hello {name}!", {"name": "World"}) == "Hello World!"

    def test_positional(self) -> None:
        """Positional tokens index into a sequence."""
        assert interpolate("{0} before {1}", ["a", "b"]) == "a before b"

    def test_values_are_stringified(self) -> None:
        """Non-string values are coerced with str()."""
        assert interpolate("{0}: {1}", [3, Bold("x")]) == "3: <b>x</b>"

    def test_template_object(self) -> None:
        """Template instances are accepted as well as raw text."""
        assert interpolate(Template("Hi {name}"), {"name": "Ana"}) == "Hi Ana"

    def test_missing_named_left_literal(self) -> None:
        """Unknown names keep their {token} text."""
        assert interpolate("Hello {name}!", {}) == "Hello {name}!"

    def test_positional_out_of_range(self) -> None:
        """Indices past the end keep their {token} text."""
        assert interpolate("{0} and {1}", ["a"]) == "a and {1}"

    def test_positional_with_mapping_args(self) -> None:
        """Positional tokens need a sequence."""
        assert interpolate("{0}", {"0": "zero"}) == "{0}"

    def test_string_args_are_not_a_sequence(self) -> None:
        """A bare string is not indexed character by character."""
        assert interpolate("{0}", "abc") == "{0}"  # type: ignore[arg-type]

    def test_none_is_a_value(self) -> None:
        """None supplied in args is substituted, not treated as missing."""
        assert interpolate("{x}", {"x": None}) == "None"

    def test_count_exposed_as_n_and_count(self) -> None:
        """The active count fills {n} and {count}."""
        assert interpolate("{n} / {count}", count=5) == "5 / 5"

    def test_args_override_count(self) -> None:
        """Explicit args win over the reserved count names."""
        assert interpolate("{count} items", {"count": "many"}, count=5) == "many items"

    def test_count_not_exposed_under_other_names(self) -> None:
        """Only n and count are reserved."""
        assert interpolate("{total}", count=5) == "{total}"


# ============================================================================
# SEQUENCE MODE
# ============================================================================


class TestSequenceMode:
    """Segment-list output with unstringified values."""

    def test_values_kept_opaque(self) -> None:
        """Placeholder values are inserted as-is."""
        bold = Bold("World")
        assert interpolate("Hello {name}!", {"name": bold}, as_sequence=True) == [
            "Hello ",
            bold,
            "!",
        ]

    def test_empty_edges_kept(self) -> None:
        """Leading/trailing empty literals are not omitted."""
        assert interpolate("{0} and {1}", ["a", "b"], as_sequence=True) == [
            "",
            "a",
            " and ",
            "b",
            "",
        ]

    def test_adjacent_placeholders(self) -> None:
        """Adjacent placeholders are separated by an empty literal."""
        assert interpolate("{0}{1}", [1, 2], as_sequence=True) == ["", 1, "", 2, ""]

    def test_missing_token_fills_slot(self) -> None:
        """A missing token's literal text occupies its slot."""
        assert interpolate("Hi {name}", as_sequence=True) == ["Hi ", "{name}", ""]

    def test_count_value_unstringified(self) -> None:
        """The count keeps its numeric type."""
        assert interpolate("{count} items", count=5, as_sequence=True) == ["", 5, " items"]


# ============================================================================
# PROPERTIES
# ============================================================================


class TestInterpolationProperties:
    """Properties that hold for all templates."""

    @given(literal_text)
    def test_no_placeholders_identity(self, text: str) -> None:
        """Text without placeholders is returned unchanged (or as one segment)."""
        assert interpolate(text) == text
        assert interpolate(text, as_sequence=True) == [text]

    @given(templates_with_args())
    def test_sequence_length(self, case: tuple[str, dict[str, object], int]) -> None:
        """k placeholders always give 2k + 1 segments."""
        text, args, k = case
        segments = interpolate(text, args, as_sequence=True, count=3)
        assert isinstance(segments, list)
        assert len(segments) == 2 * k + 1

    @given(templates_with_args())
    def test_modes_agree(self, case: tuple[str, dict[str, object], int]) -> None:
        """Joining stringified segments equals string-mode output."""
        text, args, _ = case
        segments = interpolate(text, args, as_sequence=True, count=3)
        assert isinstance(segments, list)
        assert "".join(str(s) for s in segments) == interpolate(text, args, count=3)

    @given(templates_with_args())
    def test_literal_segments_at_even_positions(
        self, case: tuple[str, dict[str, object], int]
    ) -> None:
        """Literal text sits at even indices and is always a string."""
        text, args, _ = case
        segments = interpolate(text, args, as_sequence=True)
        assert isinstance(segments, list)
        assert all(isinstance(s, str) for s in segments[::2])
