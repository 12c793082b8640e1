import random
import string

import pytest
from evilhangman.datasets import DEFAULT_DICTIONARY, load_words
from evilhangman.engine import (
    Difficulty, HangmanManager, InvalidArgumentError, InvalidStateError,
    family_counts, hardest_key, second_hardest_key, is_consistent, overlay,
)


def _snapshot(mgr: HangmanManager):
    return (
        mgr.pattern(), mgr.guessed_letters(), mgr.guesses_left(),
        mgr.candidate_count(), mgr.candidates(),
    )


# --- construction ---
@pytest.mark.parametrize("words", [None, [], set(), "cat"])
def test_construction_rejects_empty_or_absent(words):
    with pytest.raises(InvalidArgumentError):
        HangmanManager(words)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        HangmanManager([])


def test_candidate_count_for_length():
    mgr = HangmanManager({"boa", "cat", "bat", "bear"})
    assert mgr.candidate_count_for_length(3) == 3
    assert mgr.candidate_count_for_length(4) == 1
    assert mgr.candidate_count_for_length(7) == 0


# --- prepare_round ---
def test_prepare_round_resets_state():
    mgr = HangmanManager(["boa", "cat", "bat", "bear"])
    mgr.prepare_round(3, 5, Difficulty.HARD)
    assert mgr.candidate_count() == 3
    assert mgr.pattern() == "---"
    assert mgr.guessed_letters() == []
    assert mgr.guesses_left() == 5
    assert mgr.word_length() == 3
    assert mgr.difficulty() is Difficulty.HARD

    mgr.make_guess("z")
    mgr.make_guess("a")
    mgr.prepare_round(4, 2, "easy")
    assert mgr.candidate_count() == 1
    assert mgr.pattern() == "----"
    assert mgr.guessed_letters() == []
    assert mgr.guesses_left() == 2
    assert mgr.difficulty() is Difficulty.EASY


@pytest.mark.parametrize("length,budget,difficulty", [
    (7, 5, Difficulty.HARD),     # no words of that length
    (3, 0, Difficulty.HARD),     # budget below 1
    (3, -2, Difficulty.HARD),
    (3, 5, "impossible"),
])
def test_prepare_round_rejects_bad_arguments(length, budget, difficulty):
    mgr = HangmanManager(["boa", "cat", "bat"])
    with pytest.raises(InvalidArgumentError):
        mgr.prepare_round(length, budget, difficulty)


def test_queries_before_prepare_round_raise():
    mgr = HangmanManager(["boa", "cat"])
    for call in (mgr.candidate_count, mgr.guesses_left, mgr.guessed_letters,
                 mgr.pattern, mgr.secret_word):
        with pytest.raises(InvalidStateError):
            call()
    with pytest.raises(InvalidStateError):
        mgr.make_guess("a")


# --- scenarios ---
def test_scenario_a_hard_keeps_biggest_family():
    mgr = HangmanManager({"boa", "cat", "bat"})
    mgr.prepare_round(3, 5, Difficulty.HARD)

    fams = mgr.evaluate("a")
    assert sorted(fams["-a-"]) == ["bat", "cat"]
    assert fams["--a"] == ["boa"]

    counts = mgr.make_guess("a")
    assert counts == {"--a": 1, "-a-": 2}
    assert list(counts) == ["--a", "-a-"]
    assert mgr.pattern() == "-a-"
    assert mgr.guesses_left() == 5
    assert mgr.candidate_count() == 2


def test_candidates_is_a_read_only_view():
    mgr = HangmanManager(["boa", "cat", "bat"])
    with pytest.raises(InvalidStateError):
        mgr.candidates()
    mgr.prepare_round(3, 5, Difficulty.HARD)
    pool = mgr.candidates()
    assert pool == ("boa", "cat", "bat")
    with pytest.raises(TypeError):
        pool[0] = "zzz"
    mgr.make_guess("a")
    assert pool == ("boa", "cat", "bat")
    assert mgr.candidates() == ("cat", "bat")


def test_scenario_c_wrong_guess():
    mgr = HangmanManager(["cat", "bat", "hat"])
    mgr.prepare_round(3, 4, Difficulty.HARD)
    counts = mgr.make_guess("z")
    assert counts == {"---": 3}
    assert mgr.pattern() == "---"
    assert mgr.guesses_left() == 3
    assert mgr.wrong_guesses() == 1
    assert mgr.candidate_count() == 3


def test_scenario_c_letter_only_in_revealed_slots_is_wrong():
    mgr = HangmanManager(["cat", "bat", "hat"])
    mgr.prepare_round(3, 4, Difficulty.HARD)
    mgr.make_guess("a")
    mgr.make_guess("t")
    assert mgr.pattern() == "-at"
    assert mgr.guesses_left() == 4
    mgr.make_guess("q")
    assert mgr.guesses_left() == 3


def test_scenario_d_medium_fourth_guess_takes_second_hardest():
    words = ["cat", "bat", "boa", "bee", "ant"]
    mgr = HangmanManager(words)
    mgr.prepare_round(3, 10, Difficulty.MEDIUM)
    for letter in "xyz":
        mgr.make_guess(letter)
    assert mgr.candidate_count() == 5

    counts = family_counts(mgr.evaluate("a"))
    assert len(counts) >= 2
    expected = second_hardest_key(counts)
    assert expected != hardest_key(counts)

    before = mgr.pattern()
    mgr.make_guess("a")
    assert mgr.pattern() == overlay(before, expected)
    assert mgr.candidate_count() == counts[expected]
    assert mgr.candidates() == ("bee",)  # "---" wins the size-1 tie on blanks


def test_hard_same_sequence_keeps_hardest():
    mgr = HangmanManager(["cat", "bat", "boa", "bee", "ant"])
    mgr.prepare_round(3, 10, Difficulty.HARD)
    for letter in "xyz":
        mgr.make_guess(letter)
    mgr.make_guess("a")
    assert mgr.pattern() == "-a-"
    assert mgr.candidate_count() == 2


def test_easy_relaxes_on_second_guess():
    mgr = HangmanManager(["cat", "bat", "boa", "bee", "ant"])
    mgr.prepare_round(3, 10, Difficulty.EASY)
    mgr.make_guess("x")   # ordinal 1: single family
    mgr.make_guess("a")   # ordinal 2: second-hardest
    assert mgr.candidates() == ("bee",)
    assert mgr.guesses_left() == 8


def test_scenario_e_repeat_guess_rejected_without_mutation():
    mgr = HangmanManager(["boa", "cat", "bat"])
    mgr.prepare_round(3, 5, Difficulty.HARD)
    mgr.make_guess("a")
    before = _snapshot(mgr)

    with pytest.raises(InvalidStateError):
        mgr.make_guess("a")
    assert _snapshot(mgr) == before

    with pytest.raises(InvalidStateError):
        mgr.evaluate("a")


def test_bad_letter_rejected_without_mutation():
    mgr = HangmanManager(["boa", "cat", "bat"])
    mgr.prepare_round(3, 5, Difficulty.HARD)
    before = _snapshot(mgr)
    for bad in ("", "ab", 7, None):
        with pytest.raises(InvalidArgumentError):
            mgr.make_guess(bad)
    assert _snapshot(mgr) == before


def test_no_guesses_after_budget_spent():
    mgr = HangmanManager(["cat", "bat"])
    mgr.prepare_round(3, 1, Difficulty.HARD)
    mgr.make_guess("z")
    assert mgr.guesses_left() == 0
    assert mgr.is_over()
    before = _snapshot(mgr)
    with pytest.raises(InvalidStateError):
        mgr.make_guess("q")
    assert _snapshot(mgr) == before


def test_guessed_letters_ascending_and_already_guessed():
    mgr = HangmanManager(["cat", "bat", "hat"])
    mgr.prepare_round(3, 8, Difficulty.HARD)
    for letter in "czb":
        mgr.make_guess(letter)
    assert mgr.guessed_letters() == ["b", "c", "z"]
    assert all(mgr.already_guessed(ch) for ch in "czb")
    assert not mgr.already_guessed("a")


def test_solved_round():
    mgr = HangmanManager(["cat"])
    mgr.prepare_round(3, 3, Difficulty.HARD)
    for letter in "cat":
        mgr.make_guess(letter)
    assert mgr.is_solved() and mgr.is_over()
    assert mgr.pattern() == "cat"
    assert mgr.secret_word() == "cat"


# --- secret word ---
def test_secret_word_is_a_live_draw_from_the_pool():
    mgr = HangmanManager(["cat", "bat", "hat", "boa"], seed=11)
    mgr.prepare_round(3, 5, Difficulty.HARD)
    mgr.make_guess("a")
    pool = set(mgr.candidates())
    draws = {mgr.secret_word() for _ in range(60)}
    assert draws <= pool
    assert len(draws) > 1


def test_secret_word_empty_pool_raises():
    mgr = HangmanManager(["cat"])
    mgr.prepare_round(3, 5, Difficulty.HARD)
    mgr._round.candidates = []  # not reachable through make_guess
    with pytest.raises(InvalidStateError):
        mgr.secret_word()


def test_managers_do_not_share_state():
    a = HangmanManager(["cat", "bat", "hat"])
    b = HangmanManager(["cat", "bat", "hat"])
    a.prepare_round(3, 5, Difficulty.HARD)
    b.prepare_round(3, 5, Difficulty.HARD)
    a.make_guess("a")
    assert b.pattern() == "---"
    assert b.guessed_letters() == []


# --- invariants over random play ---
@pytest.mark.parametrize("difficulty", list(Difficulty))
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_round_invariants_random_play(difficulty, seed):
    words = load_words(DEFAULT_DICTIONARY)
    mgr = HangmanManager(words, seed=seed)
    rng = random.Random(seed)
    length = rng.choice([3, 4, 5, 6])
    mgr.prepare_round(length, 26, difficulty)

    letters = list(string.ascii_lowercase)
    rng.shuffle(letters)
    for letter in letters:
        if mgr.is_over():
            break
        pool_before = mgr.candidates()
        pattern_before = mgr.pattern()
        left_before = mgr.guesses_left()

        fams = mgr.evaluate(letter)
        members = [w for group in fams.values() for w in group]
        # partition: disjoint and complete
        assert sorted(members) == sorted(pool_before)
        assert len(members) == len(set(members))

        counts = mgr.make_guess(letter)
        assert sum(counts.values()) == len(pool_before)

        pool_after = mgr.candidates()
        assert set(pool_after) <= set(pool_before)
        assert all(is_consistent(w, mgr.pattern(), mgr.guessed_letters()) for w in pool_after)

        unchanged = mgr.pattern() == pattern_before
        assert mgr.guesses_left() == left_before - (1 if unchanged else 0)
        assert mgr.already_guessed(letter)
