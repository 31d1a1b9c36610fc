import pytest
from hypothesis import given
from hypothesis.strategies import functions, integers

from justmaybe import Just, Maybe, Nothing, bind, fmap, match

from .common import maybes


def _half(n: int) -> Maybe[int]:
    return Just(n // 2) if n % 2 == 0 else Nothing()


class TestMap:

    def test_just(self):
        assert Just(2).map(str) == Just("2")
        assert Just([1, 2]).map(len) == Just(2)

    def test_nothing(self):
        assert Nothing().map(str) is Nothing()

    def test_not_called_on_nothing(self):
        calls = []
        Nothing().map(calls.append)
        assert calls == []

    def test_result_none_collapses(self):
        assert Just(1).map(lambda _: None) is Nothing()
        assert Just({}).map(lambda d: d.get("missing")) is Nothing()

    def test_result_not_flattened(self):
        assert Just(1).map(Just) == Just(Just(1))
        assert Just(1).map(lambda _: Nothing()) == Just(Nothing())

    def test_curried(self):
        double = fmap(lambda n: n * 2)
        assert double(Just(4)) == Just(8)
        assert double(Nothing()) is Nothing()

    def test_exception_propagates(self):
        with pytest.raises(ZeroDivisionError):
            Just(1).map(lambda n: n / 0)


class TestBind:

    def test_just(self):
        assert Just(8).bind(_half) == Just(4)
        assert Just(8).bind(_half).bind(_half).bind(_half) == Just(1)
        assert Just(3).bind(_half) is Nothing()

    def test_nothing(self):
        assert Nothing().bind(_half) is Nothing()

    def test_result_returned_as_is(self):
        inner = Just(Just(1))
        assert Just(0).bind(lambda _: inner) is inner

    def test_curried(self):
        halve = bind(_half)
        assert halve(Just(6)) == Just(3)
        assert halve(Just(5)) is Nothing()
        assert halve(Nothing()) is Nothing()


class TestMatch:

    def test_just(self):
        assert Just(3).match(lambda: "none", lambda n: f"got {n}") == "got 3"

    def test_nothing(self):
        assert Nothing().match(lambda: "none", lambda n: f"got {n}") == "none"

    def test_keywords(self):
        assert Just(1).match(on_nothing=lambda: 0, on_just=lambda n: n) == 1

    def test_calls_exactly_one(self):
        calls = []
        Just(1).match(lambda: calls.append("nothing"), calls.append)
        Nothing().match(lambda: calls.append("nothing"), calls.append)
        assert calls == [1, "nothing"]

    def test_curried(self):
        describe = match(lambda: "empty", lambda v: f"holds {v!r}")
        assert describe(Just(1)) == "holds 1"
        assert describe(Nothing()) == "empty"

    @given(maybes())
    def test_rebuilds_any_container(self, m):
        assert m.match(Nothing, Just) == m

    @given(maybes(), integers())
    def test_value_or_in_terms_of_match(self, m, fallback):
        assert m.match(lambda: fallback, lambda v: v) == m.value_or(fallback)


class TestFlatten:

    def test_nested(self):
        assert Just(Just(1)).flatten() == Just(1)
        assert Just(Nothing()).flatten() is Nothing()
        assert Nothing().flatten() is Nothing()

    def test_one_level_only(self):
        assert Just(Just(Just(1))).flatten() == Just(Just(1))

    def test_not_nested(self):
        with pytest.raises(TypeError, match="int"):
            Just(1).flatten()

    @given(maybes())
    def test_is_bind_identity(self, m):
        assert Just(m).flatten() == m
        assert Just(m).bind(lambda x: x) == m


class TestFunctorLaws:

    @given(maybes())
    def test_identity(self, m):
        assert m.map(lambda x: x) == m
        assert fmap(lambda x: x)(m) == m

    @given(
        maybes(),
        functions(like=lambda x: x, returns=integers(), pure=True),
        functions(like=lambda x: x, returns=integers(), pure=True),
    )
    def test_composition(self, m, f, g):
        assert m.map(lambda x: g(f(x))) == m.map(f).map(g)
        assert fmap(lambda x: g(f(x)))(m) == fmap(g)(fmap(f)(m))


class TestMonadLaws:

    @given(
        integers(),
        functions(like=lambda x: x, returns=maybes(), pure=True),
    )
    def test_left_identity(self, n, f):
        assert Just(n).bind(f) == f(n)
        assert bind(f)(Just(n)) == f(n)

    @given(maybes())
    def test_right_identity(self, m):
        assert m.bind(Just) == m
        assert bind(Just)(m) == m

    @given(
        maybes(),
        functions(like=lambda x: x, returns=maybes(), pure=True),
        functions(like=lambda x: x, returns=maybes(), pure=True),
    )
    def test_associativity(self, m, f, g):
        assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))
