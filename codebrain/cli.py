"""Interactive command-line front end: pick a language and a level, then take the quiz."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from codebrain.quiz import Level, QuizSession, load_questions

LANGUAGES = ("c++", "pyhton", "java")
LEVELS = (Level.LEVEL1, Level.LEVEL2, Level.LEVEL3)
LEVEL_LABELS = ("level 1", "level 2", "level 3")


class _Quit(Exception):
    """The user asked to stop, or input ran out."""


def _ask(prompt: str) -> str:
    try:
        reply = input(prompt).strip()
    except EOFError:
        raise _Quit from None
    if reply.lower() == "q":
        raise _Quit
    return reply


def _choose(heading: str, options: Sequence[str]) -> int:
    """Show numbered options and return the index of the one picked."""
    print(heading)
    for number, option in enumerate(options, 1):
        print(f"  {number}) {option}")
    while True:
        reply = _ask(f"choice [1-{len(options)}], q=quit: ")
        if reply.isdigit() and 1 <= int(reply) <= len(options):
            return int(reply) - 1
        print(f"please enter a number from 1 to {len(options)}")


def _pick_level(language: str) -> Level:
    return LEVELS[_choose(f"{language}: PICK A LEVEL", LEVEL_LABELS)]


def _show_question(session: QuizSession) -> None:
    question = session.current
    print()
    print(f"{session.level.title}    {session.points} points")
    print(session.title)
    print(session.message.rstrip("\n"))
    for number, answer in enumerate(question.answers, 1):
        mark = " *" if answer == session.selected else ""
        print(f"  {number}) {answer}{mark}")
    reply = _ask("answer number, n=next, p=previous, q=quit: ").lower()
    if reply == "p":
        if session.can_go_back:
            session.previous()
        else:
            print("this is the first question")
    elif reply in ("", "n"):
        session.next()
    elif reply.isdigit() and 1 <= int(reply) <= len(question.answers):
        session.select(question.answers[int(reply) - 1])
        session.next()
    else:
        print(f"please enter a number from 1 to {len(question.answers)}")


def _show_done(session: QuizSession) -> None:
    print()
    print(session.title)
    print(session.message)
    reply = _ask("SUBMIT with enter, p=previous, q=quit: ").lower()
    if reply in ("", "s", "submit"):
        session.next()
    elif reply == "p":
        session.previous()
    else:
        print("press enter to submit")


def _play(session: QuizSession) -> None:
    while not session.finished:
        if session.on_question:
            _show_question(session)
        else:
            _show_done(session)


def _results(session: QuizSession, show_review: bool) -> bool:
    """Show the score; return True if the user wants to pick another level."""
    print()
    print(session.message)
    if show_review:
        print(session.review(), end="")
    while True:
        reply = _ask("r=review, l=levels, q=quit: ").lower()
        if reply == "r":
            print(session.review(), end="")
        elif reply == "l":
            return True
        else:
            print("please enter r, l or q")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="codebrain", description="Take a programming quiz.")
    parser.add_argument(
        "-d", "--directory", default=".", help="directory holding the question files"
    )
    parser.add_argument("--language", choices=LANGUAGES, help="language to be quizzed on")
    parser.add_argument("-l", "--level", type=int, choices=(1, 2, 3), help="level to play")
    parser.add_argument(
        "--review", action="store_true", help="show every question with its answer at the end"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the quiz; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        language = args.language or LANGUAGES[_choose("choose a lunuage", LANGUAGES)]
        level = LEVELS[args.level - 1] if args.level else None
        while True:
            if level is None:
                level = _pick_level(language)
            try:
                questions = load_questions(level, args.directory)
            except OSError as exc:
                print(f"codebrain: cannot read questions: {exc}", file=sys.stderr)
                return 1
            try:
                session = QuizSession(questions, level)
            except ValueError as exc:
                print(f"codebrain: {exc}", file=sys.stderr)
                return 1
            _play(session)
            if not _results(session, args.review):
                return 0
            level = None
    except _Quit:
        return 0