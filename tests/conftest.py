import io
import random
import pytest
from anagrams.game.models import GameConfig
from anagrams.words.index import AnagramIndex

WORDS = [
    "dog", "god", "pot", "top", "opt",
    "post", "stop", "pots", "tops", "spot", "opts", "topi", "gods",
    "poets", "pesto", "stope", "estop", "topes", "stone",
    "posted",
]

class FixedRandom(random.Random):
    """Always starts the starter-word scan at the same index."""

    def __init__(self, start: int = 0):
        super().__init__(0)
        self.start = start

    def randrange(self, *args, **kwargs):
        return self.start

def build_index(words=WORDS, **config) -> AnagramIndex:
    source = io.StringIO("\n".join(words) + "\n")
    return AnagramIndex(source, config=GameConfig(**config), rng=FixedRandom())

@pytest.fixture
def index() -> AnagramIndex:
    return build_index()

@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return str(path)
