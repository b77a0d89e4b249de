import suite
from streamy import (
    S, stream, of, from_range, repeat, empty, generate,
    Stream, IterableStream, ReadOnlyIterator, IteratorView, EndOfSequenceError
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# --- stream() over arrays and iterables ---

@test("stream over a list yields its elements in order")
def test_stream_of_list():
    result = stream([1, 2, 3]).to_list()
    assert_that(result == [1, 2, 3], f"unexpected elements: {result}")


@test("stream over an empty tuple is empty")
def test_stream_of_empty_array():
    assert_that(stream(()).to_list() == [], "empty source should give empty stream")


@test("stream keeps none elements positionally")
def test_stream_keeps_none():
    assert_that(stream([None, None]).to_list() == [None, None], "none is a valid element")
    assert_that(stream([1, None, 2]).to_list() == [1, None, 2], "none must stay in place")


@test("stream over a generator is one-shot")
def test_stream_of_generator():
    s = stream(x * 2 for x in range(3))
    assert_that(s.to_list() == [0, 2, 4], "first pass should see everything")
    assert_that(s.to_list() == [], "generator source cannot be replayed")


@test("stream over a set or dict delegates to its iterator")
def test_stream_of_collections():
    assert_that(sorted(stream({3, 1, 2}).to_list()) == [1, 2, 3], "set contents should come through")
    assert_that(stream({'a': 1, 'b': 2}).to_list() == ['a', 'b'], "dicts iterate over keys")


@test("stream of a stream returns the same instance")
def test_stream_of_stream():
    s = of(1, 2)
    assert_that(stream(s) is s, "wrapping a stream again should be a no-op")


@test("stream rejects non-iterables immediately")
def test_stream_rejects_non_iterable():
    with assert_raises(TypeError):
        stream(42)


@test("S alias is stream")
def test_alias():
    assert_that(isinstance(S([1]), IterableStream), "S should build an iterable stream")
    assert_that(S('ab').to_list() == ['a', 'b'], "strings stream their characters")


# --- of() ---

@test("of with one argument")
def test_of_single():
    assert_that(of(1).to_list() == [1], "single element")


@test("of with varargs keeps none positionally")
def test_of_varargs():
    assert_that(of(1, None, 2).to_list() == [1, None, 2], "none must stay in place")


@test("of with no arguments is empty")
def test_of_empty():
    assert_that(of().to_list() == [], "of() should be empty")


# --- other factories ---

@test("from_range counts up from start")
def test_from_range():
    assert_that(from_range(5, 3).to_list() == [5, 6, 7], "should give 5, 6, 7")
    assert_that(from_range(5, 0).to_list() == [], "zero count is empty")
    assert_that(from_range(5, -2).to_list() == [], "negative count is empty")


@test("repeat with a count")
def test_repeat_count():
    assert_that(repeat('x', 3).to_list() == ['x', 'x', 'x'], "three copies")
    assert_that(repeat(None, 2).to_list() == [None, None], "none can be repeated")


@test("repeat without a count is infinite but take bounds it")
def test_repeat_infinite():
    assert_that(repeat(7).take(4).to_list() == [7, 7, 7, 7], "take should bound an infinite repeat")


@test("repeat is restartable")
def test_repeat_restartable():
    r = repeat(1, 2)
    assert_that(r.to_list() == r.to_list() == [1, 1], "each iteration should replay")


@test("empty is empty every time")
def test_empty():
    e = empty()
    assert_that(e.to_list() == [] and e.to_list() == [], "empty stays empty")


@test("generate calls the function once per pulled element")
def test_generate_calls():
    calls = []
    g = generate(lambda: calls.append(1) or len(calls))
    assert_that(calls == [], "constructing should not call the function")
    result = g.take(3).to_list()
    assert_that(result == [1, 2, 3], f"unexpected values: {result}")
    assert_that(len(calls) == 3, f"expected 3 calls, got {len(calls)}")


@test("generate with a count stops on its own")
def test_generate_count():
    assert_that(generate(lambda: 'a', 2).to_list() == ['a', 'a'], "two generated values")


@test("generate rejects non-callables")
def test_generate_rejects():
    with assert_raises(TypeError):
        generate(5)


# --- iteration primitive ---

@test("iterate returns a read-only view without remove")
def test_view_is_read_only():
    view = of(1).iterate()
    assert_that(isinstance(view, ReadOnlyIterator), "views should be read-only iterators")
    assert_that(not hasattr(view, 'remove'), "views must not expose remove")


@test("has_next and next walk the view")
def test_view_walk():
    view = of(1, None).iterate()
    assert_that(view.has_next(), "should have a first element")
    assert_that(view.has_next(), "has_next is idempotent")
    assert_that(view.next() == 1, "first element is 1")
    assert_that(view.next() is None, "second element is none")
    assert_that(not view.has_next(), "view should now be exhausted")


@test("next on an exhausted view raises end of sequence")
def test_view_end_of_sequence():
    view = empty().iterate()
    with assert_raises(EndOfSequenceError) as caught:
        view.next()
    assert_that(isinstance(caught['error'], LookupError), "end of sequence is a lookup error")


@test("an exhausted view never reports availability again")
def test_view_stays_exhausted():
    class Resuming:
        """an iterator that resumes after signalling the end"""
        def __init__(self):
            self.calls = 0
        def __iter__(self):
            return self
        def __next__(self):
            self.calls += 1
            if self.calls == 1:
                raise StopIteration
            return self.calls

    view = IteratorView(Resuming())
    assert_that(not view.has_next(), "first check sees the end")
    assert_that(not view.has_next(), "view must stay exhausted")
    assert_that(list(view) == [], "python iteration must also stay exhausted")


@test("views work with python for loops")
def test_view_protocol():
    total = 0
    for item in of(1, 2, 3).iterate():
        total += item
    assert_that(total == 6, f"sum should be 6: {total}")


@test("custom streams only need iterate()")
def test_custom_stream():
    class Countdown(Stream):
        def __init__(self, start):
            self._start = start
        def iterate(self):
            return IteratorView(iter(range(self._start, 0, -1)))

    c = Countdown(3)
    assert_that(c.to_list() == [3, 2, 1], "custom stream should iterate")
    assert_that(c.map(str).to_list() == ['3', '2', '1'], "custom stream gets every operator")


if __name__ == "__main__":
    suite.run(title="streamy source and iteration test suite")
