import json
from typing import Literal
from pydantic import BaseModel, Field, model_validator

class GameConfig(BaseModel):
    min_anagrams: int = Field(5, gt=0)         # One-letter anagrams a starter word needs
    default_word_length: int = Field(3, gt=0)  # Length of the first starter word
    max_word_length: int = Field(7, gt=0)      # Starter words never grow past this
    max_scan_attempts: int | None = Field(None, gt=0)  # None scans the whole bucket

    @model_validator(mode="after")
    def check_lengths(self) -> "GameConfig":
        if self.default_word_length > self.max_word_length:
            raise ValueError("default_word_length must not exceed max_word_length")
        return self

    @classmethod
    def from_file(cls, filepath: str) -> "GameConfig":
        with open(filepath, 'r') as f:
            return cls.model_validate(json.load(f))

class Round(BaseModel):
    round_number: int
    starter_word: str
    word_length: int             # Length of the starter word
    answers: list[str]           # Anagrams of the starter word plus one letter
    found: list[str] = Field(default_factory=list)

class GuessResult(BaseModel):
    word: str
    status: Literal["correct", "duplicate", "invalid", "not_an_answer"]
    remaining: int               # Answers still to find after this guess

    @property
    def is_correct(self) -> bool:
        return self.status == "correct"
