import json
import pytest
from pydantic import ValidationError
from conftest import FixedRandom
from anagrams.game.errors import NoActiveRoundError, NoQualifyingWordError
from anagrams.game.models import GameConfig
from anagrams.game.session import GameSession

def test_start_round(index):
    session = GameSession(index, rng=FixedRandom())
    current = session.start_round()
    assert current.round_number == 1
    assert current.starter_word == "pot"
    assert current.word_length == 3
    assert current.answers == ["topi", "post", "stop", "pots", "tops", "spot", "opts"]
    assert session.word_length == 4

def test_guess_grading(index):
    session = GameSession(index, rng=FixedRandom())
    session.start_round()

    result = session.guess("stop")
    assert result.status == "correct"
    assert result.is_correct
    assert result.remaining == 6

    assert session.guess("  TOPS ").status == "correct"
    assert session.guess("stop").status == "duplicate"
    assert session.guess("spot").status == "invalid"
    assert session.guess("pot").status == "invalid"
    assert session.guess("xyzzy").status == "invalid"
    assert session.guess("").status == "invalid"
    assert session.guess("posted").status == "not_an_answer"
    assert session.guess("dog").status == "not_an_answer"
    assert session.remaining() == ["topi", "post", "pots", "spot", "opts"]

def test_guess_without_round(index):
    session = GameSession(index)
    assert session.remaining() == []
    with pytest.raises(NoActiveRoundError):
        session.guess("stop")

def test_rounds_grow_until_no_word_qualifies(index):
    session = GameSession(index, rng=FixedRandom())
    assert session.start_round().starter_word == "pot"
    assert session.start_round().starter_word == "post"
    with pytest.raises(NoQualifyingWordError):
        session.start_round()
    assert len(session.rounds) == 2
    assert session.word_length == 5

def test_sessions_progress_independently(index):
    first = GameSession(index, rng=FixedRandom())
    second = GameSession(index, rng=FixedRandom())
    first.start_round()
    first.start_round()
    assert first.word_length == 5
    assert second.word_length == 3
    assert second.start_round().word_length == 3
    assert index.target_word_length == 3

def test_config_defaults():
    config = GameConfig()
    assert config.min_anagrams == 5
    assert config.default_word_length == 3
    assert config.max_word_length == 7
    assert config.max_scan_attempts is None

def test_config_validation():
    with pytest.raises(ValidationError):
        GameConfig(default_word_length=8)
    with pytest.raises(ValidationError):
        GameConfig(min_anagrams=0)
    with pytest.raises(ValidationError):
        GameConfig(max_scan_attempts=0)

def test_config_from_file(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({"min_anagrams": 2, "max_word_length": 5}))
    config = GameConfig.from_file(str(path))
    assert config.min_anagrams == 2
    assert config.max_word_length == 5
    assert config.default_word_length == 3
