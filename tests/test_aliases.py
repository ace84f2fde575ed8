"""Tests for runtime.aliases: {{key}} expansion, cycles and idempotency."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from keytranslate.diagnostics import CyclicAliasError, DiagnosticCode, UnresolvedAliasError
from keytranslate.runtime.aliases import expand_aliases, resolve_aliases
from keytranslate.store import MessageStore
from keytranslate.store.nodes import Group, Template


def _text(store: MessageStore, key: str) -> str:
    node = store[key]
    assert Template.guard(node)
    return node.text


class TestExpansion:
    """Successful expansion."""

    def test_simple_alias(self) -> None:
        """An alias is replaced by the target's text."""
        expanded, errors = expand_aliases(
            {"support": "Contact support", "footer": "Need help? {{support}}"}
        )
        assert _text(expanded, "footer") == "Need help? Contact support"
        assert errors == ()

    def test_nested_aliases(self) -> None:
        """Targets are expanded before being inlined."""
        expanded, _ = expand_aliases({"a": "A{{b}}", "b": "B{{c}}", "c": "C"})
        assert _text(expanded, "a") == "ABC"
        assert _text(expanded, "b") == "BC"

    def test_alias_next_to_brace_is_rescanned(self) -> None:
        """Inlined text that completes a new alias span is expanded too."""
        data = {"a": "{{{b}}}", "b": "{c}", "c": "C"}
        expanded, errors = expand_aliases(data)
        assert _text(expanded, "a") == "C"
        assert errors == ()
        again, _ = expand_aliases(expanded)
        assert dict(again) == dict(expanded)

    def test_brace_wrapped_dangling_alias_stays(self) -> None:
        """Rescanning stops once nothing more resolves."""
        expanded, errors = expand_aliases({"a": "{{{b}}}", "b": "{nope}"})
        assert _text(expanded, "a") == "{{nope}}"
        assert len(errors) == 1
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.ALIAS_NOT_FOUND

    def test_repeated_alias(self) -> None:
        """Every occurrence is replaced."""
        expanded, _ = expand_aliases({"x": "X", "y": "{{x}}-{{x}}"})
        assert _text(expanded, "y") == "X-X"

    def test_whitespace_inside_braces(self) -> None:
        """Alias names are stripped."""
        expanded, _ = expand_aliases({"x": "X", "y": "{{ x }}"})
        assert _text(expanded, "y") == "X"

    def test_placeholders_survive(self) -> None:
        """Target placeholders are inlined as placeholders."""
        expanded, _ = expand_aliases({"hi": "Hi {name}", "msg": "{{hi}}!"})
        assert _text(expanded, "msg") == "Hi {name}!"

    def test_group_target_uses_default_branch(self) -> None:
        """A group contributes its '*' (else 'n') branch."""
        expanded, errors = expand_aliases(
            {
                "button": {"*": "Click me", "submit": "Send"},
                "items": {0: "none", "n": "{count} items"},
                "a": "[{{button}}]",
                "b": "[{{items}}]",
            }
        )
        assert _text(expanded, "a") == "[Click me]"
        assert _text(expanded, "b") == "[{count} items]"
        assert errors == ()

    def test_group_branches_not_rewritten(self) -> None:
        """Only top-level templates are rewritten."""
        expanded, _ = expand_aliases({"x": "X", "g": {"*": "{{x}}"}})
        group = expanded["g"]
        assert Group.guard(group)
        assert group.children["*"] == Template("{{x}}")

    def test_unchanged_store_returned_as_is(self) -> None:
        """With nothing to expand, the same snapshot comes back."""
        store = MessageStore.from_mapping({"a": "A", "b": "{name}"})
        expanded, errors = expand_aliases(store)
        assert expanded is store
        assert errors == ()

    def test_input_snapshot_not_modified(self) -> None:
        """Expansion builds a new snapshot."""
        store = MessageStore.from_mapping({"x": "X", "y": "{{x}}"})
        expanded, _ = expand_aliases(store)
        assert expanded is not store
        assert _text(store, "y") == "{{x}}"


class TestUnresolved:
    """Dangling and cyclic aliases stay verbatim and are reported."""

    def test_dangling_alias(self) -> None:
        """Unknown targets are left verbatim; the rest still expands."""
        expanded, errors = expand_aliases({"x": "X", "y": "{{x}} {{nope}}"})
        assert _text(expanded, "y") == "X {{nope}}"
        assert len(errors) == 1
        assert type(errors[0]) is UnresolvedAliasError
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.ALIAS_NOT_FOUND
        assert errors[0].key == "y"

    def test_group_without_default(self) -> None:
        """A group without '*' or 'n' cannot be inlined."""
        expanded, errors = expand_aliases({"g": {"a": "A"}, "y": "{{g}}"})
        assert _text(expanded, "y") == "{{g}}"
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.ALIAS_NO_DEFAULT_BRANCH

    def test_two_key_cycle(self) -> None:
        """Mutual aliases terminate and stay verbatim."""
        expanded, errors = expand_aliases({"a": "{{b}}", "b": "{{a}}"})
        assert _text(expanded, "a") == "{{b}}"
        assert _text(expanded, "b") == "{{a}}"
        assert len(errors) == 1
        assert isinstance(errors[0], CyclicAliasError)
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.resolution_path == ("a", "b", "a")

    def test_self_alias(self) -> None:
        """A key aliasing itself is a cycle."""
        expanded, errors = expand_aliases({"a": "x {{a}}"})
        assert _text(expanded, "a") == "x {{a}}"
        assert isinstance(errors[0], CyclicAliasError)

    def test_alias_into_cycle_stays_verbatim(self) -> None:
        """Keys that reach a cycle keep the alias; unrelated parts expand."""
        expanded, _ = expand_aliases(
            {"a": "{{b}}", "b": "{{a}}", "s": "S", "c": "{{a}} and {{s}}"}
        )
        assert _text(expanded, "c") == "{{a}} and S"

    def test_depth_limit(self) -> None:
        """Chains longer than max_depth stop without RecursionError."""
        data = {f"k{i}": f"{{{{k{i + 1}}}}}" for i in range(10)}
        data["k10"] = "end"
        expanded, errors = expand_aliases(data, max_depth=5)
        assert _text(expanded, "k0") == "{{k1}}"
        assert any(
            e.diagnostic is not None and e.diagnostic.code is DiagnosticCode.ALIAS_DEPTH_EXCEEDED
            for e in errors
        )

    def test_long_chain_within_default_depth(self) -> None:
        """Chains under the default limit expand fully."""
        data = {f"k{i}": f"{{{{k{i + 1}}}}}" for i in range(50)}
        data["k50"] = "end"
        expanded, errors = expand_aliases(data)
        assert _text(expanded, "k0") == "end"
        assert errors == ()

    def test_depth_failure_does_not_block_shorter_chains(self) -> None:
        """Keys that overflowed deep in one chain still expand on their own."""
        data = {f"k{i}": f"{{{{k{i + 1}}}}}" for i in range(100)}
        data["k100"] = "end"
        expanded, errors = expand_aliases(data)
        assert _text(expanded, "k0") == "{{k1}}"
        assert _text(expanded, "k1") == "end"
        assert _text(expanded, "k99") == "end"
        assert [e.diagnostic.code for e in errors if e.diagnostic is not None] == [
            DiagnosticCode.ALIAS_DEPTH_EXCEEDED
        ]

    def test_depth_limit_threshold_per_key(self) -> None:
        """Each top-level key gets the full depth budget."""
        data = {f"k{i}": f"{{{{k{i + 1}}}}}" for i in range(8)}
        data["k8"] = "end"
        expanded, _ = expand_aliases(data, max_depth=5)
        texts = [_text(expanded, f"k{i}") for i in range(9)]
        assert texts == ["{{k1}}", "{{k2}}", "{{k3}}", "{{k4}}", "end", "end", "end", "end", "end"]


class TestResolveAliases:
    """Standalone utility and its logging."""

    def test_returns_store(self) -> None:
        """resolve_aliases returns only the expanded store."""
        store = resolve_aliases({"support": "Contact support", "footer": "{{support}}"})
        assert isinstance(store, MessageStore)
        assert _text(store, "footer") == "Contact support"

    def test_debug_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """With debug, unresolved aliases are logged as warnings."""
        with caplog.at_level(logging.DEBUG, logger="keytranslate"):
            resolve_aliases({"a": "{{nope}}"}, debug=True)
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "nope" in warnings[0].getMessage()

    def test_no_debug_logs_debug_only(self, caplog: pytest.LogCaptureFixture) -> None:
        """Without debug, nothing above DEBUG is logged."""
        with caplog.at_level(logging.DEBUG, logger="keytranslate"):
            resolve_aliases({"a": "{{nope}}"})
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


# ============================================================================
# IDEMPOTENCY
# ============================================================================

_KEYS = ["a", "b", "c", "d", "e"]
_chunk = st.one_of(
    st.text(alphabet="xyz ", max_size=3),
    st.sampled_from(["a", "b", "c", "d", "e", "missing"]).map(lambda k: f"{{{{{k}}}}}"),
    st.sampled_from(["{name}", "{", "}"]),
)
_template_text = st.lists(_chunk, max_size=4).map("".join)
_node = st.one_of(
    _template_text,
    st.dictionaries(st.sampled_from(["*", "n", "0", "x"]), _template_text, max_size=3),
)


class TestIdempotency:
    """expand(expand(S)) == expand(S)."""

    @given(st.dictionaries(st.sampled_from(_KEYS), _node))
    def test_expand_is_idempotent(self, data: dict[str, object]) -> None:
        """A second pass changes nothing."""
        once, _ = expand_aliases(data)
        twice, _ = expand_aliases(once)
        assert dict(twice) == dict(once)

    @given(st.dictionaries(st.sampled_from(_KEYS), _node))
    def test_expansion_terminates_with_consistent_errors(self, data: dict[str, object]) -> None:
        """Every reported error is an UnresolvedAliasError for a known owner."""
        _, errors = expand_aliases(data)
        for error in errors:
            assert isinstance(error, UnresolvedAliasError)
            assert error.key in data
