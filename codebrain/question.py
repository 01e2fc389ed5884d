"""Quiz questions and the plain-text format they are stored in."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

SEPARATOR = "###"
ANSWER_DELIMITER = "@"


@dataclass
class Question:
    """A multiple-choice question whose first answer is the correct one."""

    text: str
    answers: tuple[str, ...]
    is_correct: bool = field(default=False)

    def __post_init__(self) -> None:
        self.answers = tuple(self.answers)
        if not self.answers:
            raise ValueError("a question needs at least one answer")

    @property
    def correct(self) -> str:
        """The correct answer."""
        return self.answers[0]

    def make_correct(self) -> None:
        """Mark the question as answered correctly."""
        self.is_correct = True


def parse_questions(lines: Iterable[str]) -> list[Question]:
    """Parse question blocks.

    Each block is one or more lines of question text, a line holding only
    ``###``, and one line of answers separated by ``@``; the first answer is
    the correct one. Text left without an answer line is dropped. An answer
    line that is itself ``###`` ends the parse.
    """
    questions: list[Question] = []
    text_lines: list[str] = []
    awaiting_answers = False
    for raw in lines:
        line = raw.rstrip("\r\n")
        if awaiting_answers:
            questions.append(Question("".join(text_lines), line.split(ANSWER_DELIMITER)))
            text_lines = []
            awaiting_answers = False
            if line == SEPARATOR:
                break
            continue
        if line == SEPARATOR:
            awaiting_answers = True
        else:
            text_lines.append(line + "\n")
    return questions