"""Tests for the pipeline entry points."""

import json
from datetime import date, timedelta

import pytest

from src.models.quiz import QuizSpec
from src.pipeline.errors import MalformedAIResponse, MissingRequiredFields
from src.pipeline.normalize import normalize_course_response, normalize_quiz_response
from src.pipeline.scheduler import MAX_DURATION_WEEKS


class TestNormalizeQuizResponse:
    """Test quiz normalization end to end."""

    def test_fenced_response(self, raw_quiz_response: str, quiz_spec: QuizSpec):
        """Test a typical fenced model response."""
        questions = normalize_quiz_response(raw_quiz_response, quiz_spec)

        assert [q.id for q in questions] == [1, 2, 3]
        assert [q.correct_answer for q in questions] == ["B", "C", "A"]
        assert all(q.time_per_question == 45 for q in questions)
        assert not any(q.answer_defaulted for q in questions)

    def test_prose_wrapped_response(self, quiz_spec: QuizSpec):
        """Test that an array surrounded by prose is recovered."""
        raw = (
            'Sure! Here are your questions: [{"question":"Q1","options":'
            '["a","b","c","d"],"correctAnswer":"D"}] Hope that helps!'
        )
        questions = normalize_quiz_response(raw, quiz_spec)

        assert len(questions) == 1
        assert questions[0].question == "Q1"
        assert questions[0].correct_answer == "D"

    def test_bracketed_prose_before_array(self, quiz_spec: QuizSpec):
        """Test that a bracketed count in the prose does not replace the quiz."""
        raw = (
            'Here are [3] questions: [{"question":"Q1","options":["a","b","c","d"],'
            '"correctAnswer":"B"}]'
        )
        questions = normalize_quiz_response(raw, quiz_spec)

        assert len(questions) == 1
        assert questions[0].question == "Q1"
        assert questions[0].options == ["a", "b", "c", "d"]
        assert questions[0].correct_answer == "B"
        assert questions[0].answer_defaulted is False

    def test_deeply_nested_response(self, quiz_spec: QuizSpec):
        """Test that runaway nesting is reported as a malformed response."""
        with pytest.raises(MalformedAIResponse):
            normalize_quiz_response("[" * 100000 + "]" * 100000, quiz_spec)

    def test_defective_items_never_raise(self, quiz_spec: QuizSpec):
        """Test that every element is coerced into a valid question."""
        spec = QuizSpec(entity_name="Python", question_count=10)
        items = [
            {},
            {"options": "not a list"},
            {"question": "Q", "correctAnswer": 5},
            {"question": "Q", "options": [1, 2, 3, 4, 5, 6], "correctAnswer": "zzz"},
            "not an object",
            None,
            {"question": "   ", "options": ["only one"], "correctAnswer": "Answer: d"},
        ]

        questions = normalize_quiz_response(json.dumps(items), spec)

        assert len(questions) == len(items)
        for q in questions:
            assert len(q.options) == 4
            assert q.correct_answer in {"A", "B", "C", "D"}
            assert q.question
        assert questions[-1].correct_answer == "D"
        assert questions[-1].question == "Question 7"

    def test_defaulted_answers_are_flagged(self, quiz_spec: QuizSpec):
        """Test that the 'A' fallback is signalled."""
        raw = json.dumps([{"question": "Q", "correctAnswer": "completely invalid"}])
        question = normalize_quiz_response(raw, quiz_spec)[0]

        assert question.correct_answer == "A"
        assert question.answer_defaulted is True

    def test_output_clamped_to_thirty(self):
        """Test that a 50 question request yields at most 30 questions."""
        spec = QuizSpec(entity_name="Python", question_count=50)
        raw = json.dumps([{"question": f"Q{i}"} for i in range(40)])

        questions = normalize_quiz_response(raw, spec)

        assert len(questions) == 30
        assert questions[-1].id == 30

    def test_fewer_items_are_not_padded(self, quiz_spec: QuizSpec):
        """Test that missing questions are never fabricated."""
        spec = QuizSpec(entity_name="Python", question_count=10)
        questions = normalize_quiz_response('[{"question": "Only one"}]', spec)
        assert len(questions) == 1

    def test_truncates_to_requested_count(self, quiz_items: list, quiz_spec: QuizSpec):
        """Test that extra questions beyond the request are dropped."""
        spec = QuizSpec(entity_name="Python", question_count=2)
        questions = normalize_quiz_response(json.dumps(quiz_items), spec)
        assert len(questions) == 2

    def test_malformed_response_raises(self, quiz_spec: QuizSpec):
        """Test that unrecoverable text raises MalformedAIResponse."""
        with pytest.raises(MalformedAIResponse) as exc_info:
            normalize_quiz_response("```json\nI could not do that\n```", quiz_spec)

        assert exc_info.value.text == "I could not do that"


class TestNormalizeCourseResponse:
    """Test course normalization end to end."""

    def test_prose_wrapped_response(self, raw_course_response: str, anchor_date: date):
        """Test a complete response surrounded by prose."""
        info = normalize_course_response(raw_course_response, anchor_date)

        assert info.name == "Machine Learning"
        assert info.provider == "Coursera"
        assert info.main_skills == ["Python", "NumPy", "Model evaluation"]
        assert [m.deadline for m in info.milestones] == [
            anchor_date + timedelta(days=28),
            anchor_date + timedelta(days=56),
            anchor_date + timedelta(days=84),
        ]

    def test_serialized_record(self, raw_course_response: str, anchor_date: date):
        """Test the JSON form returned to the web client."""
        data = normalize_course_response(raw_course_response, anchor_date).model_dump(
            mode="json", by_alias=True
        )

        assert data["milestones"][0] == {
            "name": "Linear regression",
            "deadline": "2025-01-29",
        }
        assert "mainSkills" in data

    def test_missing_milestones(self, course_data: dict, anchor_date: date):
        """Test that missing milestones raise MissingRequiredFields."""
        del course_data["milestones"]

        with pytest.raises(MissingRequiredFields) as exc_info:
            normalize_course_response(json.dumps(course_data), anchor_date)

        assert exc_info.value.missing == ["milestones"]

    def test_empty_prerequisites_accepted(self, course_data: dict, anchor_date: date):
        """Test that a beginner course with no prerequisites is complete."""
        course_data["prerequisites"] = []

        info = normalize_course_response(json.dumps(course_data), anchor_date)

        assert info.prerequisites == []
        assert len(info.milestones) == 3

    def test_empty_milestones_rejected(self, course_data: dict, anchor_date: date):
        """Test that a course without milestones cannot be scheduled."""
        course_data["milestones"] = []

        with pytest.raises(MissingRequiredFields) as exc_info:
            normalize_course_response(json.dumps(course_data), anchor_date)

        assert exc_info.value.missing == ["milestones"]

    def test_huge_duration_is_clamped(self, course_data: dict, anchor_date: date):
        """Test that an absurd duration still yields representable deadlines."""
        course_data["duration"] = "999999 weeks"

        info = normalize_course_response(json.dumps(course_data), anchor_date)

        assert info.duration == "999999 weeks"
        # clamped to MAX_DURATION_WEEKS, ceil(520 / 3) = 174 weeks each
        assert MAX_DURATION_WEEKS == 520
        assert info.final_deadline == anchor_date + timedelta(weeks=174 * 3)

    def test_unparseable_duration_defaults(self, course_data: dict, anchor_date: date):
        """Test that a duration without a number schedules over 12 weeks."""
        course_data["duration"] = "Self-paced"
        info = normalize_course_response(json.dumps(course_data), anchor_date)
        assert info.final_deadline == anchor_date + timedelta(weeks=12)

    def test_malformed_response(self, anchor_date: date):
        """Test that text without an object raises MalformedAIResponse."""
        with pytest.raises(MalformedAIResponse):
            normalize_course_response("Sorry, I cannot browse URLs.", anchor_date)

    def test_strictness_differs_from_quiz(self, anchor_date: date, quiz_spec: QuizSpec):
        """Test that empty input is coerced for quizzes but rejected for courses."""
        assert normalize_quiz_response("[{}]", quiz_spec)[0].question == "Question 1"

        with pytest.raises(MissingRequiredFields):
            normalize_course_response("{}", anchor_date)
