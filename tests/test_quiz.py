import pytest

from codebrain.question import Question
from codebrain.quiz import Level, QuizError, QuizSession, load_questions


def make_questions(count=8):
    return [Question(f"question {i}\n", [f"right{i}", f"wrong{i}"]) for i in range(count)]


def answer_all(session, correct=True):
    for question in session.questions:
        session.select(question.correct if correct else question.answers[1])
        session.next()


def test_level_titles_and_files():
    assert Level.LEVEL1.title == "LEVEL1"
    assert Level("python1") is Level.LEVEL2
    assert Level.LEVEL3.filename == "python2.txt"


def test_load_questions_from_file(tmp_path):
    lines = []
    for i in range(8):
        lines += [f"q{i}", "###", f"a{i}@b{i}@c{i}@d{i}"]
    (tmp_path / "pyhton.txt").write_text("\n".join(lines), encoding="utf-8")
    questions = load_questions(Level.LEVEL1, tmp_path)
    assert len(questions) == 8
    assert questions[5].text == "q5\n"
    assert questions[5].correct == "a5"


def test_load_questions_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_questions(Level.LEVEL2, tmp_path)


def test_too_few_questions_rejected():
    with pytest.raises(ValueError):
        QuizSession(make_questions(7))


def test_initial_state():
    questions = make_questions()
    session = QuizSession(questions, Level.LEVEL2)
    assert session.number == 1
    assert session.title == "Question 1 of 8"
    assert session.current is questions[0]
    assert session.message == "question 0\n"
    assert session.can_go_back is False


def test_previous_at_start_raises():
    session = QuizSession(make_questions())
    with pytest.raises(QuizError):
        session.previous()


def test_select_unknown_answer_raises():
    session = QuizSession(make_questions())
    with pytest.raises(ValueError):
        session.select("nonsense")


def test_next_and_previous_keep_selection():
    session = QuizSession(make_questions())
    session.select("wrong0")
    assert session.next() is session.questions[1]
    assert session.can_go_back is True
    assert session.previous() is session.questions[0]
    assert session.selected == "wrong0"


def test_correct_answer_scores_point():
    session = QuizSession(make_questions())
    session.select("right0")
    session.next()
    assert session.points == 1
    assert session.questions[0].is_correct is True


def test_all_correct_reaches_results():
    session = QuizSession(make_questions())
    answer_all(session)
    assert session.title == "YOU DONE  "
    assert session.message == "you done "
    assert session.points == 8
    session.next()
    assert session.finished is True
    assert session.title is None
    assert session.feedback() == 100.0
    assert session.message == "you got  100%"


def test_results_are_terminal():
    session = QuizSession(make_questions())
    answer_all(session)
    session.next()
    with pytest.raises(QuizError):
        session.next()
    with pytest.raises(QuizError):
        session.previous()


def test_all_wrong_scores_zero():
    session = QuizSession(make_questions())
    answer_all(session, correct=False)
    assert session.points == 0
    assert session.feedback() == 0.0
    assert all(s is not None for s in session.selections)


def test_select_outside_question_raises():
    session = QuizSession(make_questions())
    answer_all(session)
    with pytest.raises(QuizError):
        session.select("right0")


def test_review_lists_every_question():
    session = QuizSession(make_questions())
    text = session.review()
    for question in session.questions:
        block = question.text + "\n" + "".join(a + "\n" for a in question.answers)
        assert block + question.correct + "\n" in text