import pytest
from pydantic import ValidationError

from huegen.color import ColorSession, InvalidColorFormat
from huegen.config import GeneratorSettings
from huegen.random import SeededRandom

BG = "#0000FF"


def test_memory_starts_empty():
    assert ColorSession().previous_colors == []


def test_remember_accumulates_prefix():
    session = ColorSession()
    first = session.generate(BG, 5, True)
    assert len(first) == 5
    assert session.previous_colors == first

    second = session.generate(BG, 10, True)
    assert len(second) == 10
    assert second[:5] == first
    assert session.previous_colors == second


def test_forget_flag_resets_memory():
    session = ColorSession()
    session.generate(BG, 5, True)
    colors = session.generate(BG, 5, False)
    assert len(colors) == 5
    assert session.previous_colors == []


def test_forget_flag_on_fresh_session():
    session = ColorSession()
    assert len(session.generate(BG, 3, False)) == 3
    assert session.previous_colors == []


def test_shrinking_request_returns_whole_memory():
    session = ColorSession()
    stored = session.generate(BG, 6, True)
    again = session.generate(BG, 2, True)
    assert again == stored
    assert session.previous_colors == stored


def test_sessions_are_isolated():
    a = ColorSession(rng=SeededRandom(1))
    b = ColorSession(rng=SeededRandom(2))
    a.generate(BG, 4, True)
    assert b.previous_colors == []
    b.generate(BG, 2, True)
    assert len(a.previous_colors) == 4
    assert len(b.previous_colors) == 2


def test_previous_colors_is_a_copy():
    session = ColorSession()
    session.generate(BG, 3, True)
    session.previous_colors.append("#000000")
    assert len(session.previous_colors) == 3


def test_forget_method():
    session = ColorSession()
    session.generate(BG, 3, True)
    session.forget()
    assert session.previous_colors == []


def test_invalid_bg_leaves_memory_untouched():
    session = ColorSession()
    stored = session.generate(BG, 3, True)
    with pytest.raises(InvalidColorFormat):
        session.generate("#XYZXYZ", 5, False)
    assert session.previous_colors == stored


def test_session_draws_from_its_source(scripted):
    session = ColorSession(rng=scripted(["#FFFFFF", "#00FFFF"]))
    assert session.generate("#000000", 2, True) == ["#FFFFFF", "#00FFFF"]


def test_session_budget_comes_from_settings(scripted):
    # white is never farther than 500 from black, so both draws are rejected
    rng = scripted(["#FFFFFF", "#FFFFFF", "#123456"])
    session = ColorSession(GeneratorSettings(threshold=500, max_attempts=2), rng=rng)
    assert session.generate("#000000", 1, True) == ["#123456"]
    assert rng.draws == 3


def test_session_threshold_comes_from_settings(scripted):
    rng = scripted(["#050505"])
    session = ColorSession(GeneratorSettings(threshold=5), rng=rng)
    assert session.generate("#000000", 1, False) == ["#050505"]


def test_seeded_sessions_match():
    a = ColorSession(rng=SeededRandom(77)).generate(BG, 5, True)
    b = ColorSession(rng=SeededRandom(77)).generate(BG, 5, True)
    assert a == b


def test_settings_validation():
    with pytest.raises(ValidationError):
        GeneratorSettings(threshold=-1)
    with pytest.raises(ValidationError):
        GeneratorSettings(avoid_list_max_attempts=0)
    assert GeneratorSettings().threshold == 100
    assert GeneratorSettings().max_attempts == 1000
