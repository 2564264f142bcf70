from geolab.prng import MASK32, SeededRandom, rng_from_seed, xmur3


def test_same_seed_same_stream():
    a = rng_from_seed("abc123")
    b = rng_from_seed("abc123")
    assert [a.next() for _ in range(50)] == [b.next() for _ in range(50)]


def test_different_seed_different_stream():
    a = rng_from_seed("abc123")
    b = rng_from_seed("abc124")
    assert [a.next() for _ in range(10)] != [b.next() for _ in range(10)]


def test_values_in_unit_interval():
    r = rng_from_seed("range")
    for _ in range(2000):
        v = r.next()
        assert 0.0 <= v < 1.0


def test_call_is_next():
    a = rng_from_seed("x")
    b = rng_from_seed("x")
    assert a() == b.next()


def test_next_int_inclusive_bounds():
    r = rng_from_seed("ints")
    seen = {r.next_int(3, 6) for _ in range(500)}
    assert seen == {3, 4, 5, 6}


def test_next_int_single_value():
    r = rng_from_seed("one")
    assert all(r.next_int(7, 7) == 7 for _ in range(20))


def test_empty_seed_is_default():
    assert [rng_from_seed("").next() for _ in range(1)] == [rng_from_seed("seed").next()]
    assert SeededRandom(None).seed == "seed"


def test_xmur3_is_32_bit():
    for text in ("", "a", "seed", "héllo", "emoji \U0001F600"):
        h = xmur3(text)
        assert 0 <= h <= MASK32


def test_xmur3_sensitive_to_salt():
    assert xmur3("seed") != xmur3("seed$")
    assert xmur3("@seed") != xmur3("#seed")


def test_shuffle_returns_new_permutation():
    r = rng_from_seed("shuffle")
    src = ["a", "b", "c", "d", "e"]
    out = r.shuffle(src)
    assert out is not src
    assert src == ["a", "b", "c", "d", "e"]
    assert sorted(out) == src


def test_shuffle_deterministic():
    src = list(range(10))
    assert rng_from_seed("k").shuffle(src) == rng_from_seed("k").shuffle(src)


def test_pick_and_uniform():
    r = rng_from_seed("pick")
    seq = ("x", "y", "z")
    for _ in range(100):
        assert r.pick(seq) in seq
        assert 2.0 <= r.uniform(2.0, 5.0) < 5.0


def test_stream_matches_reference_vectors():
    r = rng_from_seed("abc123")
    assert r.next() == 0.26333658886142075
    assert r.next() == 0.1481867446564138
    assert r.next() == 0.11130323400720954
    assert r.next_int(0, 6) == 6
    assert r.shuffle([1, 2, 3, 4, 5]) == [1, 3, 5, 2, 4]


def test_surrogate_pairs_hashed_as_utf16():
    assert rng_from_seed("héllo \U0001F600").next() == 0.7920692968182266
