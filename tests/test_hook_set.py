"""Tests for HookSet normalization and combine_hooks."""

import logging

import pytest

from lambda_hooks.pipeline.hook import HookSet, combine_hooks, hook_name


async def hook_a(state):
    return state


async def hook_b(state):
    return state


async def hook_c(state):
    return state


class TestHookSetFromPartial:
    """Test normalization of single partial hook sets."""

    def test_none_is_empty(self) -> None:
        """Test None normalizes to the empty hook set."""
        assert HookSet.from_partial(None) == HookSet()

    def test_missing_fields_default_to_empty(self) -> None:
        """Test fields missing from a mapping default to empty tuples."""
        hook_set = HookSet.from_partial({"before": [hook_a]})

        assert hook_set.before == (hook_a,)
        assert hook_set.after == ()
        assert hook_set.on_error == ()

    def test_on_error_aliases(self) -> None:
        """Test both onError and on_error keys are accepted."""
        assert HookSet.from_partial({"onError": [hook_a]}).on_error == (hook_a,)
        assert HookSet.from_partial({"on_error": [hook_b]}).on_error == (hook_b,)

    def test_hook_set_passes_through(self) -> None:
        """Test an existing HookSet is returned unchanged."""
        hook_set = HookSet(before=(hook_a,))
        assert HookSet.from_partial(hook_set) is hook_set

    def test_unknown_keys_ignored(self, caplog) -> None:
        """Test unknown keys are ignored with a warning."""
        with caplog.at_level(logging.WARNING):
            hook_set = HookSet.from_partial({"before": [hook_a], "around": [hook_b]})

        assert hook_set == HookSet(before=(hook_a,))
        assert "Ignoring unknown hook set key 'around'" in caplog.text

    def test_hook_set_is_immutable(self) -> None:
        """Test hook sets cannot be modified after construction."""
        hook_set = HookSet(before=(hook_a,))

        with pytest.raises(AttributeError):
            hook_set.before = (hook_b,)  # type: ignore[misc]

    def test_lists_become_tuples(self) -> None:
        """Test later changes to the input list do not leak into the hook set."""
        before = [hook_a]
        hook_set = HookSet.from_partial({"before": before})
        before.append(hook_b)

        assert hook_set.before == (hook_a,)


class TestCombineHooks:
    """Test merging multiple partial hook sets."""

    def test_empty_input(self) -> None:
        """Test combining nothing yields all-empty sequences."""
        combined = combine_hooks([])

        assert combined.before == ()
        assert combined.after == ()
        assert combined.on_error == ()

    def test_concatenates_in_order(self) -> None:
        """Test fields are concatenated in input order."""
        a = {"before": [hook_a], "after": [hook_b], "onError": [hook_c]}
        b = {"before": [hook_b, hook_c], "onError": [hook_a]}

        combined = combine_hooks([a, b])

        assert combined.before == (hook_a, hook_b, hook_c)
        assert combined.after == (hook_b,)
        assert combined.on_error == (hook_c, hook_a)

    def test_no_deduplication(self) -> None:
        """Test the same hook given twice runs twice."""
        combined = combine_hooks([{"before": [hook_a]}, {"before": [hook_a]}])
        assert combined.before == (hook_a, hook_a)

    def test_mixed_partial_types(self) -> None:
        """Test HookSet instances, mappings and None can be combined."""
        combined = combine_hooks([HookSet(after=(hook_a,)), None, {"after": [hook_b]}])
        assert combined.after == (hook_a, hook_b)

    def test_add_operator(self) -> None:
        """Test HookSet addition matches combine_hooks."""
        a = HookSet(before=(hook_a,))
        b = HookSet(before=(hook_b,), on_error=(hook_c,))

        assert a + b == combine_hooks([a, b])

    def test_names_and_len(self) -> None:
        """Test hook names per phase and total count."""
        combined = combine_hooks([{"before": [hook_a], "onError": [hook_b, hook_c]}])

        assert len(combined) == 3
        assert combined.names() == {
            "before": ["hook_a"],
            "after": [],
            "on_error": ["hook_b", "hook_c"],
        }


def test_hook_name_falls_back_to_repr() -> None:
    """Test objects without a name use their repr."""

    class Callable:
        def __repr__(self) -> str:
            return "<callable>"

    assert hook_name(Callable()) == "<callable>"
