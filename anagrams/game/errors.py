class AnagramsError(Exception):
    """Base class for all game errors."""


class NoQualifyingWordError(AnagramsError):
    """No word of the requested length has enough one-letter anagrams."""

    def __init__(self, length: int, min_anagrams: int):
        super().__init__(
            f"No {length}-letter word has at least {min_anagrams} anagrams with one more letter"
        )
        self.length = length
        self.min_anagrams = min_anagrams


class NoActiveRoundError(AnagramsError):
    """A guess was made before a round was started."""
