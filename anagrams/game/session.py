import logging
import random
from typing import List
from anagrams.game.errors import NoActiveRoundError
from anagrams.game.models import GuessResult, Round
from anagrams.words.index import AnagramIndex

logger = logging.getLogger(__name__)

class GameSession:
    """
    One player's run of rounds over a shared AnagramIndex.
    Each session keeps its own word length progression.
    """

    def __init__(
        self,
        index: AnagramIndex,
        rng: random.Random | None = None,
    ):
        self.index = index
        self.config = index.config
        self.rng = rng or random.Random()
        self.word_length = self.config.default_word_length
        self.rounds: List[Round] = []

    @property
    def current_round(self) -> Round | None:
        return self.rounds[-1] if self.rounds else None

    def start_round(self) -> Round:
        starter = self.index.find_starter_word(self.word_length, rng=self.rng)
        current = Round(
            round_number=len(self.rounds) + 1,
            starter_word=starter,
            word_length=self.word_length,
            answers=self.index.anagrams_with_one_more_letter(starter),
        )
        self.rounds.append(current)
        self.word_length = self.index.next_word_length(self.word_length)
        logger.info(
            "Round %s: %s with %s answers",
            current.round_number, starter, len(current.answers),
        )
        return current

    def guess(self, word: str) -> GuessResult:
        current = self.current_round
        if current is None:
            raise NoActiveRoundError("Start a round before guessing")

        word = (word or "").strip().lower()
        if not self.index.is_valid_guess(word, current.starter_word):
            status = "invalid"
        elif word in current.found:
            status = "duplicate"
        elif word in current.answers:
            current.found.append(word)
            status = "correct"
        else:
            status = "not_an_answer"

        logger.debug("Guess %s on %s: %s", word, current.starter_word, status)
        return GuessResult(word=word, status=status, remaining=len(self.remaining()))

    def remaining(self) -> List[str]:
        current = self.current_round
        if current is None:
            return []
        return [w for w in current.answers if w not in current.found]
