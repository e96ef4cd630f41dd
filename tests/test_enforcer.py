from __future__ import annotations

from dataclasses import replace
from typing import Optional

from core.config import WORDS, LimitConfig
from core.enforcer import LimitEnforcer


class FakeSurface:
    def __init__(self, content: str = "", cursor: Optional[int] = None) -> None:
        self.content = content
        self.cursor = len(content) if cursor is None else cursor
        self.calls: list[str] = []

    def full_content(self) -> str:
        return self.content

    def cursor_position(self) -> int:
        return self.cursor

    def delete_before_cursor(self, count: int) -> None:
        self.calls.append("delete")
        start = max(0, self.cursor - count)
        self.content = self.content[:start] + self.content[self.cursor :]
        self.cursor = start

    def mark_undo_boundary(self) -> None:
        self.calls.append("boundary")

    def insert(self, text: str) -> None:
        self.calls.append("insert")
        self.content = self.content[: self.cursor] + text + self.content[self.cursor :]
        self.cursor += len(text)


class FakeNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class FakeScope:
    def __init__(self, in_scope: bool = True) -> None:
        self.in_scope = in_scope

    def is_in_scope(self, document_id: str) -> bool:
        return self.in_scope


def _enforcer(surface: FakeSurface, notifier: FakeNotifier, in_scope: bool = True) -> LimitEnforcer:
    return LimitEnforcer("draft.txt", surface, notifier, FakeScope(in_scope))


def test_keystroke_over_limit_is_reverted() -> None:
    config = LimitConfig(max_chars=10)
    surface = FakeSurface("0123456789")
    notifier = FakeNotifier()
    enforcer = _enforcer(surface, notifier)

    surface.insert("x")
    reverted = enforcer.on_incremental_insert(config)

    assert reverted is True
    assert surface.content == "0123456789"
    # The correction stays with the keystroke; the next edit starts afresh.
    assert surface.calls == ["insert", "delete", "boundary"]
    assert notifier.messages == ["Limit reached: 10 chars"]


def test_keystroke_reaching_limit_is_kept() -> None:
    config = LimitConfig(max_chars=10)
    surface = FakeSurface("012345678")
    notifier = FakeNotifier()
    enforcer = _enforcer(surface, notifier)

    surface.insert("9")
    assert enforcer.on_incremental_insert(config) is False
    assert surface.content == "0123456789"
    assert not notifier.messages


def test_keystroke_in_middle_reverts_the_inserted_character() -> None:
    config = LimitConfig(max_chars=5)
    surface = FakeSurface("abcde", cursor=2)
    enforcer = _enforcer(surface, FakeNotifier())

    surface.insert("X")
    enforcer.on_incremental_insert(config)

    assert surface.content == "abcde"
    assert surface.cursor == 2


def test_already_over_limit_reverts_every_keystroke() -> None:
    config = LimitConfig(max_chars=3)
    surface = FakeSurface("abcdef")
    notifier = FakeNotifier()
    enforcer = _enforcer(surface, notifier)

    for ch in "xyz":
        surface.insert(ch)
        assert enforcer.on_incremental_insert(config) is True

    assert surface.content == "abcdef"
    assert len(notifier.messages) == 3


def test_multi_character_keystroke_is_reverted_whole() -> None:
    config = LimitConfig(max_chars=4)
    surface = FakeSurface("abc")
    enforcer = _enforcer(surface, FakeNotifier())

    surface.insert("    ")
    enforcer.on_incremental_insert(config, length=4)

    assert surface.content == "abc"


def test_new_word_over_word_limit_is_reverted() -> None:
    config = replace(LimitConfig(max_words=2), limit_type=WORDS)
    surface = FakeSurface("one two ")
    notifier = FakeNotifier()
    enforcer = _enforcer(surface, notifier)

    surface.insert("t")
    enforcer.on_incremental_insert(config)

    assert surface.content == "one two "
    assert notifier.messages == ["Limit reached: 2 words"]


def test_keystroke_out_of_scope_is_ignored() -> None:
    config = LimitConfig(max_chars=1)
    surface = FakeSurface("abc")
    notifier = FakeNotifier()
    enforcer = _enforcer(surface, notifier, in_scope=False)

    surface.insert("d")
    assert enforcer.on_incremental_insert(config) is False
    assert surface.content == "abcd"
    assert not notifier.messages


def test_paste_is_trimmed_to_fit() -> None:
    config = LimitConfig(max_chars=10)
    surface = FakeSurface("hello")
    notifier = FakeNotifier()
    enforcer = _enforcer(surface, notifier)
    pasted = "ABCDEFGHIJKLMNOPQRST"

    result = enforcer.wrap_bulk_insert(config, lambda: surface.insert(pasted))

    assert surface.content == "hello" + pasted[:5]
    assert result is not None
    assert (result.inserted, result.kept, result.trimmed) == (20, 5, 15)
    assert surface.calls == ["boundary", "insert", "delete", "boundary"]
    assert notifier.messages == ["Paste trimmed to fit: kept 5 of 20 chars"]


def test_paste_that_fits_is_untouched() -> None:
    config = LimitConfig(max_chars=10)
    surface = FakeSurface("abc")
    notifier = FakeNotifier()
    enforcer = _enforcer(surface, notifier)

    result = enforcer.wrap_bulk_insert(config, lambda: surface.insert("defg"))

    assert surface.content == "abcdefg"
    assert result is not None
    assert result.trimmed == 0
    assert not notifier.messages
    assert surface.calls == ["boundary", "insert"]


def test_paste_out_of_scope_passes_through() -> None:
    config = LimitConfig(max_chars=10)
    surface = FakeSurface("hello")
    notifier = FakeNotifier()
    enforcer = _enforcer(surface, notifier, in_scope=False)

    result = enforcer.wrap_bulk_insert(config, lambda: surface.insert("ABCDEFGHIJKLMNOPQRST"))

    assert result is None
    assert len(surface.content) == 25
    assert not notifier.messages


def test_paste_trim_clamps_at_document_start() -> None:
    config = LimitConfig(max_chars=5)
    # Paste at the very start of a document that is already over budget.
    surface = FakeSurface("0123456789", cursor=0)
    enforcer = _enforcer(surface, FakeNotifier())

    result = enforcer.wrap_bulk_insert(config, lambda: surface.insert("xy"))

    assert surface.content == "0123456789"
    assert surface.cursor == 0
    assert result is not None
    assert result.kept == 0


def test_paste_trimmed_by_words() -> None:
    config = replace(LimitConfig(max_words=4), limit_type=WORDS)
    surface = FakeSurface("one two ")
    notifier = FakeNotifier()
    enforcer = _enforcer(surface, notifier)

    result = enforcer.wrap_bulk_insert(config, lambda: surface.insert("three four five six"))

    assert surface.content == "one two three four "
    assert result is not None
    assert (result.inserted, result.kept) == (4, 2)
    assert notifier.messages == ["Paste trimmed to fit: kept 2 of 4 words"]
