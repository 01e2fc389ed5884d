# codebrain

A small multiple-choice quiz for practising programming knowledge in the
terminal. You pick a language and one of three levels, answer eight
questions, and get your score as a percentage at the end. You can also review
every question together with its correct answer.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the quiz

```
codebrain
```

The quiz asks you to choose a language (`c++`, `pyhton` or `java`) and a
level (1, 2 or 3). It then shows the questions one at a time, with the level,
your points so far and "Question N of 8" above each one. At each question
you can:

- type an answer's number to choose it and move on,
- press enter or `n` to move on without changing your choice,
- type `p` to go back to the previous question,
- type `q` to quit.

A point is added each time you move past a question whose chosen answer is
the correct one. After the eighth question comes a "done" screen; press enter
to submit (or `p` to go back). The results screen shows the percentage of
your final answers that were correct. From there, `r` prints the review, `l`
goes back to the level choice, and `q` quits.

Options:

- `-d DIR`, `--directory DIR`: directory holding the question files
  (default: the current directory)
- `--language {c++,pyhton,java}`: skip the language prompt
- `-l {1,2,3}`, `--level {1,2,3}`: skip the level prompt for the first quiz
- `--review`: print the review straight after the score

The command exits with status 1 if a question file cannot be read or holds
fewer than eight questions.

## Question files

Each level reads its questions from its own plain-text file (UTF-8) in the
question directory:

| Level | File          |
|-------|---------------|
| 1     | `pyhton.txt`  |
| 2     | `python1.txt` |
| 3     | `python2.txt` |

A question is written as one or more lines of text, followed by a line
holding exactly `###`, followed by one line with the possible answers
separated by `@` (with no spaces around it, as spaces become part of the
answer). The **first** answer on that line is the correct one; answers are
shown in the order they are written. Text that is not followed by an answer
line is ignored.

```
What does len([1, 2, 3]) return?
###
3@2@1@an error
Is a tuple mutable?
###
no@yes
```

A quiz uses the first eight questions of the file, in file order.

## Using it from Python

```python
from codebrain.quiz import Level, QuizSession, load_questions

level = Level.LEVEL1
questions = load_questions(level, ".")
session = QuizSession(questions, level)
session.select(session.current.answers[0])
session.next()
print(session.points, session.feedback())
```

- `codebrain.question.parse_questions(lines)` turns the lines of a question
  file into `Question` objects; `Question.correct` is the first answer.
- `QuizSession` steps through the eight questions with `next()` and
  `previous()`, records choices with `select(answer)` (a `ValueError` for an
  answer that is not offered), and offers `feedback()` (the score as a
  percentage), `review()` (each question, its answers and its correct answer)
  and the `title` and `message` texts for the current screen. Actions that do
  not fit the current stage raise `codebrain.quiz.QuizError`.

## What it does not do

- It has no graphical window; the quiz runs in the terminal only.
- The language choice does not change the questions: every language uses the
  same three question files.
- Questions are not shuffled, and no question files are shipped with the
  package; you supply them yourself.