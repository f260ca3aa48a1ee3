import pytest
from termwordle.engine import LetterVerdict
from termwordle.game import Backspace, GameSession, GameState, Quit, Submit, TypeChar

WORDS = ["crane", "slate", "moist", "built", "plumb", "dough", "whisk", "raise"]


def _type(session, word):
    for ch in word:
        session.type_character(ch)


def _play(session, word):
    _type(session, word)
    return session.submit()


def test_win_on_second_guess():
    s = GameSession("CRANE", WORDS)
    assert _play(s, "SLATE") is True
    assert s.state is GameState.IN_PROGRESS
    assert _play(s, "crane") is True
    assert s.state is GameState.WON
    assert s.finished and s.won
    assert len(s.guesses) == 2
    assert s.pending_input == ""


def test_loss_after_six_misses():
    s = GameSession("CRANE", WORDS)
    for w in ["SLATE", "MOIST", "BUILT", "PLUMB", "DOUGH", "WHISK"]:
        assert s.state is GameState.IN_PROGRESS
        assert _play(s, w) is True
    assert s.state is GameState.LOST
    assert s.finished and not s.won
    assert len(s.guesses) == 6
    assert s.remaining_turns == 0


def test_unknown_word_is_rejected_without_mutation():
    s = GameSession("CRANE", WORDS)
    _play(s, "SLATE")
    _type(s, "ABCDE")
    before = (s.guesses, s.pending_input, s.state)
    for _ in range(3):
        assert s.submit() is False
        assert (s.guesses, s.pending_input, s.state) == before
    assert s.pending_input == "ABCDE"


def test_short_input_is_rejected():
    s = GameSession("CRANE", WORDS)
    _type(s, "CRA")
    assert s.submit() is False
    assert s.pending_input == "CRA"
    assert s.guesses == ()


def test_typing_rules():
    s = GameSession("CRANE", WORDS)
    _type(s, "cr4-n é")
    assert s.pending_input == "CRN"
    _type(s, "ABCDEF")
    assert s.pending_input == "CRNAB"
    s.backspace()
    s.backspace()
    assert s.pending_input == "CRN"
    for _ in range(5):
        s.backspace()
    assert s.pending_input == ""


def test_finished_session_ignores_input():
    s = GameSession("CRANE", WORDS)
    _play(s, "CRANE")
    _type(s, "SLATE")
    assert s.pending_input == ""
    assert s.submit() is False
    assert len(s.guesses) == 1


def test_handle_dispatches_events():
    s = GameSession("CRANE", WORDS)
    for ch in "SLATX":
        assert s.handle(TypeChar(ch)) is True
    assert s.handle(Backspace()) is True
    assert s.handle(TypeChar("e")) is True
    assert s.handle(Submit()) is True
    assert len(s.guesses) == 1
    assert s.handle(Quit()) is False


def test_knowledge_queries_follow_history():
    s = GameSession("CRANE", WORDS)
    _play(s, "SLATE")
    _type(s, "SPA")
    assert s.known_verdict("A", 2) is LetterVerdict.CORRECT
    assert s.pending_verdicts() == [LetterVerdict.ABSENT, None, LetterVerdict.CORRECT]
    assert s.letter_states()["L"] is LetterVerdict.ABSENT


def test_secret_is_always_guessable():
    s = GameSession("ALLOY", WORDS)
    assert "ALLOY" in s.word_list
    assert _play(s, "ALLOY") is True
    assert s.won


@pytest.mark.parametrize("secret,words", [
    ("CRANES", WORDS),
    ("CR4NE", WORDS),
    ("CRANE", []),
])
def test_constructor_validates(secret, words):
    with pytest.raises(ValueError):
        GameSession(secret, words)
