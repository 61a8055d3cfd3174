from __future__ import annotations

from yamlsymbols.outline.ancestors import AncestorStack
from yamlsymbols.outline.classifier import Key


def _stack(*keys: Key) -> AncestorStack:
    stack = AncestorStack()
    for key in keys:
        stack.push(key)
    return stack


def test_empty_stack_has_empty_path() -> None:
    stack = AncestorStack()
    assert len(stack) == 0
    assert stack.path() == ""


def test_push_extends_path() -> None:
    stack = _stack(Key("a", 0), Key("b", 2))
    assert stack.path() == "a.b"


def test_replace_top_swaps_innermost_key() -> None:
    stack = _stack(Key("a", 0), Key("b", 2))
    stack.replace_top(Key("c", 2))
    assert stack.values() == ["a", "c"]


def test_replace_top_on_empty_stack_pushes() -> None:
    stack = AncestorStack()
    stack.replace_top(Key("a", 2))
    assert stack.values() == ["a"]


def test_truncate_at_depth_drops_matching_key_and_descendants() -> None:
    stack = _stack(Key("a", 0), Key("b", 2), Key("c", 4), Key("d", 6))
    assert stack.truncate_at_depth(2) is True
    assert stack.values() == ["a"]


def test_truncate_at_depth_without_match_is_noop() -> None:
    stack = _stack(Key("a", 0), Key("b", 2), Key("c", 6))
    assert stack.truncate_at_depth(4) is False
    assert stack.values() == ["a", "b", "c"]


def test_truncate_to_parent_keeps_strictly_shallower_keys() -> None:
    stack = _stack(Key("a", 0), Key("b", 2), Key("c", 6))
    stack.truncate_to_parent_of(4)
    assert stack.values() == ["a", "b"]


def test_truncate_to_parent_can_empty_stack() -> None:
    stack = _stack(Key("a", 4))
    stack.truncate_to_parent_of(2)
    assert len(stack) == 0


def test_reset_discards_everything() -> None:
    stack = _stack(Key("a", 0), Key("b", 2))
    stack.reset(Key("z", 0))
    assert [key.value for key in stack] == ["z"]
