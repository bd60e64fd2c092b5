"""Scoring of quiz attempts and aggregate statistics."""

import math
from collections.abc import Iterable, Sequence

from src.models.quiz import QuizDifficulty, QuizQuestion
from src.models.results import AnsweredQuestion, QuizResult, QuizStats
from src.pipeline.coercion import normalize_answer_code


def score_quiz(
    questions: Sequence[QuizQuestion],
    answers: Sequence[str | None],
    course_name: str | None = None,
    difficulty: QuizDifficulty = QuizDifficulty.MEDIUM,
    time_spent: int | None = None,
) -> QuizResult:
    """
    Score a learner's answers against normalized questions.

    Answers are read with the same letter normalization as model output, so
    "b", "B) Paris" and "B" all count as B. Unanswered questions are wrong.

    Args:
        questions: Normalized quiz questions
        answers: Learner answers by position (missing entries count as unanswered)
        course_name: Name of the course the quiz was about
        difficulty: Quiz difficulty
        time_spent: Seconds spent on the whole quiz

    Returns:
        QuizResult with per-question correctness
    """
    if not questions:
        raise ValueError("Cannot score a quiz without questions")

    answered = []
    for index, question in enumerate(questions):
        raw_answer = answers[index] if index < len(answers) else None
        user_answer = normalize_answer_code(raw_answer)
        answered.append(
            AnsweredQuestion(
                question=question.question,
                correct_answer=question.correct_answer,
                user_answer=user_answer,
                is_correct=user_answer == question.correct_answer,
            )
        )

    return QuizResult(
        course_name=course_name,
        difficulty=difficulty,
        questions=answered,
        score=sum(1 for q in answered if q.is_correct),
        total_questions=len(answered),
        time_spent=time_spent,
    )


def summarize_results(results: Iterable[QuizResult]) -> QuizStats:
    """
    Aggregate quiz results into overall statistics.

    The average is the percentage of correct answers over all questions
    answered, not the mean of per-quiz percentages. Halves round up.
    """
    results = list(results)
    if not results:
        return QuizStats()

    total_correct = sum(r.score for r in results)
    total_questions = sum(r.total_questions for r in results)
    average = total_correct / total_questions * 100 if total_questions else 0

    return QuizStats(
        total_quizzes=len(results),
        average_score=math.floor(average + 0.5),
        total_questions=total_questions,
        total_correct=total_correct,
    )
