import suite
from streamy import stream, of, from_range, generate

test = suite.test
assert_that = suite.assert_that
CountingSource = suite.CountingSource


def build_every_operator(source):
    """one chain touching every chainable operator"""
    return (stream(source)
            .map(lambda v: v + 1)
            .flat_map(lambda v: [v, v])
            .filter(lambda v: v > 0)
            .distinct()
            .with_(100)
            .without(3)
            .merge([7, 8])
            .separate([8])
            .skip(1)
            .take(50)
            .sorted()
            .reverse()
            .cast(int)
            .compose(lambda s: s.map(lambda v: v * 2)))


@test("building a chain performs zero pulls")
def test_no_pulls_on_construction():
    source = CountingSource([1, 2, 3, 4])
    build_every_operator(source)
    assert_that(source.iterations == 0, f"source opened {source.iterations} times")
    assert_that(source.pulls == 0, f"source pulled {source.pulls} times")


@test("requesting a view without driving it performs zero pulls")
def test_no_pulls_on_iterate():
    source = CountingSource([1, 2, 3, 4])
    build_every_operator(source).iterate()
    assert_that(source.pulls == 0, f"source pulled {source.pulls} times")


@test("the full chain computes the expected result")
def test_full_chain_result():
    result = build_every_operator([1, 2, 3, 4]).to_list()
    # map+flat_map+distinct -> 2 3 4 5, with_ 100, without 3, merge 7 8, separate 8,
    # skip 1 -> 4 5 100 7, sort and reverse -> 100 7 5 4, doubled
    assert_that(result == [200, 14, 10, 8], f"unexpected: {result}")


@test("element-wise operators pull one element per output")
def test_pull_per_output():
    source = CountingSource(list(range(100)))
    view = stream(source).map(lambda v: v * 2).filter(lambda v: v % 4 == 0).iterate()
    assert_that(next(view) == 0, "first even double")
    assert_that(source.pulls == 1, f"one pull for the first match: {source.pulls}")
    assert_that(next(view) == 4, "second match")
    assert_that(source.pulls == 3, f"rejected elements are pulled only as needed: {source.pulls}")


@test("consumer can stop early on an infinite source")
def test_infinite_source_early_stop():
    counter = {'n': 0}
    def tick():
        counter['n'] += 1
        return counter['n']

    result = generate(tick).map(lambda v: v * v).filter(lambda v: v % 2 == 1).take(3).to_list()
    assert_that(result == [1, 9, 25], f"unexpected: {result}")
    assert_that(counter['n'] == 5, f"only five values generated: {counter['n']}")


@test("list-backed streams replay on every iteration")
def test_restartable():
    s = of(3, 1, 2).map(lambda v: v * 10).sorted().skip(1)
    assert_that(s.to_list() == [20, 30], "first run")
    assert_that(s.to_list() == [20, 30], "second run")
    assert_that(list(s) == list(s), "python iteration replays too")


@test("independent views over one stream do not share state")
def test_independent_views():
    s = from_range(0, 5).distinct().take(3)
    a, b = s.iterate(), s.iterate()
    assert_that(next(a) == 0 and next(a) == 1, "advance a")
    assert_that(next(b) == 0, "b starts from the beginning")
    assert_that(list(a) == [2] and list(b) == [1, 2], "each view finishes on its own")


@test("errors propagate unchanged through the chain")
def test_error_propagation():
    class Boom(Exception):
        pass

    def explode(v):
        if v == 2:
            raise Boom(v)
        return v

    view = of(1, 2, 3).map(explode).filter(lambda v: True).distinct().iterate()
    assert_that(next(view) == 1, "elements before the failure come through")
    try:
        next(view)
        assert_that(False, "the error should surface")
    except Boom as e:
        assert_that(e.args == (2,), f"error should be untouched: {e.args}")


if __name__ == "__main__":
    suite.run(title="streamy laziness test suite")
