from __future__ import annotations

import random

import pytest

from app.application.use_cases.reply_variety import ReplyVarietySelector


def test_never_repeats_with_two_candidates():
    selector = ReplyVarietySelector(random.Random(1))
    memory: dict[str, str] = {}
    picks = []
    for _ in range(100):
        choice, memory = selector.select("greeting", ["a", "b"], memory)
        picks.append(choice)

    assert all(x != y for x, y in zip(picks, picks[1:]))


def test_single_candidate_is_always_returned():
    selector = ReplyVarietySelector(random.Random(1))
    memory: dict[str, str] = {}
    for _ in range(5):
        choice, memory = selector.select("only", ["solo"], memory)
        assert choice == "solo"


def test_memory_is_per_key():
    selector = ReplyVarietySelector(random.Random(3))
    choice, memory = selector.select("a", ["x", "y", "z"], {"b": "x"})
    assert memory["a"] == choice
    assert memory["b"] == "x"


def test_input_memory_is_not_mutated():
    selector = ReplyVarietySelector(random.Random(3))
    memory = {"a": "x"}
    selector.select("a", ["x", "y"], memory)
    assert memory == {"a": "x"}


def test_empty_candidates_rejected():
    with pytest.raises(ValueError):
        ReplyVarietySelector().pick([], None)
