"""Hierarchical key generation such as ``0003.0001.0004``."""

from __future__ import annotations

import re

_DIGITS_AND_DOTS = re.compile(r"[0-9.]+")


class HierarKeyError(ValueError):
    """Raised when a hierarchical key path is malformed or cannot be built."""


class HierarKey:
    """Generate dot-separated, fixed-width hierarchical tree numbering."""

    def __init__(self, seed: int, width: int, padding: str = "0") -> None:
        if seed < 0:
            seed = 1
        if width <= 0:
            width = 3
        self._seed = seed
        self._width = width
        self._padding = padding or "0"
        self._prev_leaf = ""
        self._seq: dict[str, int] = {}
        self._curr_leaf = self._pad(seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def width(self) -> int:
        return self._width

    @property
    def padding(self) -> str:
        return self._padding

    @property
    def curr_leaf(self) -> str:
        """The most recently produced key."""
        return self._curr_leaf

    @property
    def prev_leaf(self) -> str:
        """The key that was current before the last change."""
        return self._prev_leaf

    def validate(self, func_name: str, path: str) -> None:
        """Raise HierarKeyError unless ``path`` is a well-formed key of this width."""
        if not _DIGITS_AND_DOTS.fullmatch(path):
            raise HierarKeyError(f"{func_name}: {path} must contain only Digits and Dots")
        if path.startswith(".") or path.endswith("."):
            raise HierarKeyError(f"{func_name}: {path} must NOT start or end with Dots")
        for item in path.split("."):
            if len(item) != self._width:
                raise HierarKeyError(
                    f"{func_name}: {item} of length {len(item)} is <> initiated width: {self._width}"
                )

    def _pad(self, n: int) -> str:
        text = str(n)
        if len(text) >= self._width:
            return text
        return self._padding * (self._width - len(text)) + text

    def _fill(self, text: str, pad_char: str) -> str:
        count = self._width - len(text)
        if count < 0:
            raise HierarKeyError(f"{text} is longer than the initiated width: {self._width}")
        return pad_char * count + text

    @staticmethod
    def _join(root: str, leaf: str) -> str:
        return f"{root}.{leaf}" if root else leaf

    def get_next_seq(self, path: str) -> int:
        """Return the next free sequence number on the level of ``path``."""
        self.validate("get_next_seq", path)
        root, _, last = path.rpartition(".")
        path_idx = int(last)

        curr_path = path
        next_idx = self._seed
        while curr_path in self._seq:
            next_idx = self._seq[curr_path] + 1
            curr_path = self._join(root, self._pad(next_idx))
            if next_idx == path_idx:
                break
        return next_idx

    def get_next_level_seq(self, path: str) -> int:
        """Return the next free sequence number for a path one level down."""
        self.validate("get_next_level_seq", path)
        return self.get_next_seq(path)

    def set_curr_leaf(self, value: str, idx: int) -> None:
        """Make ``value`` the current leaf and record ``idx`` as its sequence number."""
        self._prev_leaf = self._curr_leaf
        self._curr_leaf = value
        self._seq[value] = idx

    def next_leaf(self, curr_leaf: str | None = None) -> str:
        """Advance to the next sibling of ``curr_leaf`` (default: the current leaf)."""
        path = self._curr_leaf if curr_leaf is None else curr_leaf
        self.validate("next_leaf", path)
        idx = self.get_next_seq(path)
        root = path.rpartition(".")[0]
        self.set_curr_leaf(self._join(root, self._pad(idx)), idx)
        return self._curr_leaf

    def next_level(self, curr_leaf: str | None = None) -> str:
        """Descend one level below ``curr_leaf`` (default: the current leaf)."""
        base = self._curr_leaf if curr_leaf is None else curr_leaf
        new_leaf = f"{base}.{self._pad(self._seed)}"
        idx = self.get_next_level_seq(new_leaf)
        self.set_curr_leaf(new_leaf, idx)
        return self._curr_leaf

    def prev_level(self, level_decr: int | None = None) -> str:
        """Climb ``level_decr`` levels (default one) and take the next leaf there."""
        if level_decr is None:
            decr = 1
        elif level_decr < 1:
            raise HierarKeyError(f"prev_level: {level_decr} is less than one")
        else:
            decr = level_decr

        root = self._curr_leaf
        for _ in range(decr):
            if root.find(".") <= 0:
                break
            root = root.rpartition(".")[0]
        return self.next_leaf(root)

    def pad(self, n: int, pad_char: str | None = None) -> str:
        """Format ``n`` to the key width using ``pad_char`` (default: the padding)."""
        char = self._padding if pad_char is None else pad_char
        return self._fill(str(n), char)

    def pad_path(self, path: str) -> str:
        """Pad every dot-separated entry of ``path`` to the key width."""
        return ".".join(self._fill(item, self._padding) for item in path.split("."))

    def jump_to_level(self, path: str) -> str:
        """Move to ``path``, creating missing parents; an existing leaf yields its next sibling."""
        target = self.pad_path(path) if path else self._pad(self._seed)
        self.validate("jump_to_level", target)

        parts = target.split(".")
        last_pos = len(parts) - 1
        parent = ""
        for pos, part in enumerate(parts):
            idx = int(part)
            if idx < self._seed:
                idx = self._seed
                part = self._pad(idx)
            parent = part if pos == 0 else f"{parent}.{part}"
            if parent not in self._seq:
                self.set_curr_leaf(parent, idx)
            elif pos == last_pos:
                return self.next_leaf(parent)
        return self._curr_leaf