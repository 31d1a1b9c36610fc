import pickle

from justmaybe import Just, Maybe, Nothing, fmap


def test_new(benchmark):
    benchmark(Just, 5)


def test_new_collapsing(benchmark):
    benchmark(Just, None)


def test_from_tuple(benchmark):
    benchmark(Maybe.from_tuple, 5, True)


def test_hash(benchmark):
    m = Just(5)
    benchmark(hash, m)


def test_eq(benchmark):
    m1 = Just(5)
    m2 = Just(5)
    benchmark(lambda: m1 == m2)


def test_value_or(benchmark):
    m = Nothing()
    benchmark(m.value_or, 3)


def test_map(benchmark):
    m = Just(5)
    benchmark(m.map, str)


def test_fmap_curried(benchmark):
    f = fmap(str)
    m = Just(5)
    benchmark(f, m)


def test_bind(benchmark):
    m = Just(5)
    benchmark(m.bind, Just)


def test_match(benchmark):
    m = Just(5)
    benchmark(m.match, int, str)


def test_format_json(benchmark):
    m = Just([1, 2, 3])
    benchmark(m.format_json)


def test_parse_json(benchmark):
    benchmark(Maybe.parse_json, "42", int)


def test_pickle(benchmark):
    m = Just(5)
    benchmark(pickle.dumps, m)
