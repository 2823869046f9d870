import logging
import random
import string
from typing import Dict, Iterable, List, Set

from anagrams.game.errors import NoQualifyingWordError
from anagrams.game.models import GameConfig

logger = logging.getLogger(__name__)


def sort_letters(word: str) -> str:
    """
    Returns the letters of word in alphabetical order (pots -> opst).
    """
    return "".join(sorted(word))


class AnagramIndex:
    """
    Loads a word list once and answers anagram queries against it.
    """

    def __init__(
        self,
        source: Iterable[str],
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        log: logging.Logger | None = None,
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.log = log or logger
        self.target_word_length = self.config.default_word_length

        self.word_list: List[str] = []
        self.word_set: Set[str] = set()
        # sorted letters -> words sharing them, in load order
        self.letters_to_words: Dict[str, List[str]] = {}
        self.size_to_words: Dict[int, List[str]] = {}

        for line in source:
            word = line.strip()
            if not word or word in self.word_set:
                continue
            self.word_list.append(word)
            self.word_set.add(word)
            self.letters_to_words.setdefault(sort_letters(word), []).append(word)
            self.size_to_words.setdefault(len(word), []).append(word)

        self.log.info(
            "Loaded %s words into %s anagram classes",
            len(self.word_list),
            len(self.letters_to_words),
        )

    @classmethod
    def from_file(cls, filepath: str, **kwargs) -> "AnagramIndex":
        with open(filepath, "r", encoding="utf-8") as f:
            return cls(f, **kwargs)

    def __len__(self) -> int:
        return len(self.word_list)

    def __contains__(self, word: str) -> bool:
        return word in self.word_set

    def words_of_length(self, length: int) -> List[str]:
        return list(self.size_to_words.get(length, []))

    def is_valid_guess(self, word: str, base: str) -> bool:
        """
        A guess must be a dictionary word that does not simply contain the base word.
        """
        if not word:
            return False
        return word in self.word_set and (base or "").lower() not in word.lower()

    def anagrams_of(self, word: str) -> List[str]:
        if not word:
            return []
        return list(self.letters_to_words.get(sort_letters(word), []))

    def anagrams_with_one_more_letter(self, word: str) -> List[str]:
        if not word:
            return []
        result = []
        for letter in string.ascii_lowercase:
            result.extend(self.anagrams_of(word + letter))
        self.log.debug("%s extends to %s", word, result)
        return result

    def find_starter_word(self, length: int, rng: random.Random | None = None) -> str:
        """
        Picks a word of the given length with at least config.min_anagrams
        one-letter extensions. Starts at a random position in the length bucket
        and scans forward, wrapping around, visiting each word at most once.
        Raises NoQualifyingWordError when the bucket has no such word.
        """
        rng = rng or self.rng
        min_anagrams = self.config.min_anagrams
        bucket = self.size_to_words.get(length, [])
        if not bucket:
            raise NoQualifyingWordError(length, min_anagrams)

        attempts = len(bucket)
        if self.config.max_scan_attempts is not None:
            attempts = min(attempts, self.config.max_scan_attempts)

        start = rng.randrange(len(bucket))
        self.log.debug("Scanning %s-letter words from index %s", length, start)
        for offset in range(attempts):
            candidate = bucket[(start + offset) % len(bucket)]
            num_anagrams = len(self.anagrams_with_one_more_letter(candidate))
            if num_anagrams >= min_anagrams:
                self.log.debug("Picked %s (%s anagrams)", candidate, num_anagrams)
                return candidate

        self.log.warning(
            "No %s-letter word with %s+ anagrams after %s attempts",
            length, min_anagrams, attempts,
        )
        raise NoQualifyingWordError(length, min_anagrams)

    def next_word_length(self, length: int) -> int:
        return min(length + 1, self.config.max_word_length)

    def pick_starter_word(self) -> str:
        """
        Picks a starter word at the current target length, then moves the
        target length up by one for the next pick.
        """
        word = self.find_starter_word(self.target_word_length)
        self.target_word_length = self.next_word_length(self.target_word_length)
        return word
