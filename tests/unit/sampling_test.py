import random

from pytest import raises

from utilkit import get_default_rng, random_choice, random_element, seed_default_rng


def test_seeded_rng_is_deterministic():
    seq = list(range(50))
    picks_a = [random_element(seq, random.Random(7)) for _ in range(5)]
    picks_b = [random_element(seq, random.Random(7)) for _ in range(5)]
    assert picks_a == picks_b


def test_matches_randrange_draw():
    seq = ["a", "b", "c", "d"]
    expected = seq[random.Random(3).randrange(len(seq))]
    assert random_element(seq, random.Random(3)) == expected


def test_every_element_reachable():
    rng = random.Random(0)
    seq = ["a", "b", "c"]
    seen = {random_element(seq, rng) for _ in range(200)}
    assert seen == set(seq)


def test_random_choice_variadic():
    rng = random.Random(1)
    assert random_choice(4, 5, 6, rng=rng) in (4, 5, 6)
    assert random_choice("only") == "only"


def test_default_rng_reseed():
    seq = list(range(100))
    seed_default_rng(42)
    first = [random_element(seq) for _ in range(5)]
    seed_default_rng(42)
    second = [random_element(seq) for _ in range(5)]
    assert first == second
    assert isinstance(get_default_rng(), random.Random)


def test_empty_input_raises():
    with raises(IndexError):
        random_element([])
    with raises(IndexError):
        random_choice(rng=random.Random(0))
