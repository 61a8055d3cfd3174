"""Ancestor stack of currently open keys."""

from __future__ import annotations

from collections.abc import Iterator

from yamlsymbols.outline.classifier import Key


class AncestorStack:
    """
    Ordered chain of open keys, outermost first.

    Each rewrite keeps indentation widths strictly increasing from the root to
    the top, so the top element always carries the current depth.
    """

    def __init__(self) -> None:
        self._keys: list[Key] = []

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Key]:
        return iter(self._keys)

    def values(self) -> list[str]:
        return [key.value for key in self._keys]

    def path(self, separator: str = ".") -> str:
        return separator.join(self.values())

    def reset(self, key: Key) -> None:
        """Start a new block rooted at ``key``."""
        self._keys = [key]

    def push(self, key: Key) -> None:
        self._keys.append(key)

    def replace_top(self, key: Key) -> None:
        """Swap the innermost key for a sibling at the same width."""
        if self._keys:
            self._keys.pop()
        self._keys.append(key)

    def truncate_at_depth(self, indentation: int) -> bool:
        """
        Drop the first key opened at ``indentation`` and everything inside it.

        Returns ``False`` and leaves the stack untouched when no open key uses
        that width.
        """
        for index, key in enumerate(self._keys):
            if key.indentation == indentation:
                del self._keys[index:]
                return True
        return False

    def truncate_to_parent_of(self, indentation: int) -> None:
        """Keep only keys strictly shallower than ``indentation``."""
        keep = len(self._keys)
        while keep and self._keys[keep - 1].indentation >= indentation:
            keep -= 1
        del self._keys[keep:]
