"""A quiz session over one level's questions."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable

from codebrain.question import Question, parse_questions

QUESTIONS_PER_QUIZ = 8
DONE_STAGE = QUESTIONS_PER_QUIZ + 1
RESULTS_STAGE = QUESTIONS_PER_QUIZ + 2


class QuizError(Exception):
    """Raised when an action does not fit the session's current stage."""


class Level(Enum):
    """A difficulty level; the value is the stem of its question file."""

    LEVEL1 = "pyhton"
    LEVEL2 = "python1"
    LEVEL3 = "python2"

    @property
    def title(self) -> str:
        return self.name

    @property
    def filename(self) -> str:
        return f"{self.value}.txt"


def load_questions(level: Level, directory: str | Path = ".") -> list[Question]:
    """Read and parse the question file for ``level`` from ``directory``."""
    path = Path(directory) / Level(level).filename
    return parse_questions(path.read_text(encoding="utf-8").splitlines())


class QuizSession:
    """Steps through eight questions, then a done screen, then the results."""

    def __init__(self, questions: Iterable[Question], level: Level = Level.LEVEL1) -> None:
        questions = list(questions)
        if len(questions) < QUESTIONS_PER_QUIZ:
            raise ValueError(
                f"a quiz needs {QUESTIONS_PER_QUIZ} questions, got {len(questions)}"
            )
        self.questions: tuple[Question, ...] = tuple(questions[:QUESTIONS_PER_QUIZ])
        self.level = level
        self.number = 1
        self.points = 0
        self._selections: list[str | None] = [None] * QUESTIONS_PER_QUIZ

    @property
    def on_question(self) -> bool:
        return self.number <= QUESTIONS_PER_QUIZ

    @property
    def finished(self) -> bool:
        return self.number == RESULTS_STAGE

    @property
    def current(self) -> Question | None:
        return self.questions[self.number - 1] if self.on_question else None

    @property
    def selected(self) -> str | None:
        return self._selections[self.number - 1] if self.on_question else None

    @property
    def selections(self) -> tuple[str | None, ...]:
        return tuple(self._selections)

    @property
    def can_go_back(self) -> bool:
        return 1 < self.number < RESULTS_STAGE

    @property
    def title(self) -> str | None:
        """Heading shown above the question; hidden on the results screen."""
        if self.on_question:
            return f"Question {self.number} of {QUESTIONS_PER_QUIZ}"
        if self.number == DONE_STAGE:
            return "YOU DONE  "
        return None

    @property
    def message(self) -> str:
        """Main text: the question, the done notice, or the score."""
        if self.on_question:
            return self.current.text
        if self.number == DONE_STAGE:
            return "you done "
        return f"you got  {self.feedback():g}%"

    def select(self, answer: str) -> None:
        """Choose an answer for the current question."""
        if not self.on_question:
            raise QuizError("there is no question to answer")
        if answer not in self.current.answers:
            raise ValueError(f"{answer!r} is not an answer to this question")
        self._selections[self.number - 1] = answer

    def next(self) -> Question | None:
        """Move forward, scoring the current selection; return the new question."""
        if self.finished:
            raise QuizError("the quiz is finished")
        question = self.current
        if question is not None and self.selected == question.correct:
            self.points += 1
            question.make_correct()
        self.number += 1
        return self.current

    def previous(self) -> Question | None:
        """Move back one step; return the new question."""
        if not self.can_go_back:
            raise QuizError("cannot go back from here")
        self.number -= 1
        return self.current

    def feedback(self) -> float:
        """Percentage of questions whose selection is the correct answer."""
        correct = sum(
            selection == question.correct
            for selection, question in zip(self._selections, self.questions)
        )
        return correct / QUESTIONS_PER_QUIZ * 100

    def review(self) -> str:
        """Each question with its answers and the correct answer."""
        return "".join(
            question.text
            + "\n"
            + "".join(answer + "\n" for answer in question.answers)
            + question.correct
            + "\n"
            for question in self.questions
        )