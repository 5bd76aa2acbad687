import hypothesis.strategies as st
import pytest
from hypothesis import given

from runereader import Builder, IllegalStateError, State, ZeroStateError

from .generators.reader_contents import (
    ESCAPES,
    escaped_contents,
    make_stream,
    plain_contents,
)

stream_kinds = pytest.mark.parametrize("kind", ["strings", "bytes"])


def escaping_reader(contents, kind):
    return (
        Builder()
        .with_source(make_stream(contents, kind))
        .with_size(4, 2)
        .with_normalize_newline()
        .with_unicode_escape()
        .with_rune_escape(ESCAPES)
        .reader()
    )


@stream_kinds
@given(plain_contents)
def test_plain_reader_reproduces_contents(kind, contents):
    reader = Builder().with_source(make_stream(contents, kind)).reader()
    chars = list(reader)
    assert "".join(c.rune for c in chars) == contents
    assert [c.pos.col for c in chars] == list(range(1, len(contents) + 1))
    assert not any(c.escaped for c in chars)


@stream_kinds
@given(escaped_contents, st.integers(min_value=1, max_value=4))
def test_next_is_idempotent(kind, contents, repeats):
    reader = escaping_reader(contents, kind)
    while True:
        try:
            first = reader.next()
        except EOFError:
            break
        for _ in range(repeats):
            assert reader.next() == first
        reader.consume()


@stream_kinds
@given(escaped_contents)
def test_positions_increase(kind, contents):
    positions = [c.pos for c in escaping_reader(contents, kind)]
    assert positions == sorted(positions)
    assert len(set(positions)) == len(positions)


@stream_kinds
@given(escaped_contents, st.data())
def test_rollback_replays_chars(kind, contents, data):
    reader = escaping_reader(contents, kind)
    chars = list(escaping_reader(contents, kind))
    skip = data.draw(st.integers(min_value=0, max_value=len(chars)))
    for _ in range(skip):
        reader.next()
        reader.consume()

    state = reader.state()
    first_pass = list(reader)
    reader.rollback(state)
    second_pass = list(reader)

    assert first_pass == second_pass == chars[skip:]


@stream_kinds
@given(escaped_contents, st.data())
def test_commit_invalidates_states(kind, contents, data):
    reader = escaping_reader(contents, kind)
    state = reader.state()
    chars = list(escaping_reader(contents, kind))
    for _ in range(data.draw(st.integers(min_value=0, max_value=len(chars)))):
        reader.next()
        reader.consume()
    reader.commit()
    with pytest.raises(IllegalStateError):
        reader.rollback(state)


@stream_kinds
@given(escaped_contents, st.integers(min_value=0, max_value=10))
def test_zero_state_is_rejected(kind, contents, reads):
    reader = escaping_reader(contents, kind)
    for _ in range(reads):
        try:
            reader.next()
        except EOFError:
            break
        reader.consume()
    with pytest.raises(ZeroStateError):
        reader.rollback(State())
