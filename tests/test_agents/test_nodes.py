"""Tests for the workflow nodes."""

from datetime import date

import pytest

from src.agents.generator import call_model
from src.agents.normalizer import normalize_course, normalize_quiz
from src.agents.prompter import build_prompt
from src.graph.state import create_course_state, create_quiz_state
from src.models.course import CourseExtractionParams
from src.models.quiz import QuizSpec
from src.pipeline.errors import MalformedAIResponse


class TestBuildPrompt:
    """Test the prompt node."""

    def test_quiz_prompt(self, quiz_spec: QuizSpec):
        """Test that a quiz state gets a quiz prompt."""
        result = build_prompt(create_quiz_state(quiz_spec))
        assert "multiple choice questions" in result["prompt"]

    def test_course_prompt(self, course_params: CourseExtractionParams, anchor_date: date):
        """Test that a course state gets a course prompt."""
        result = build_prompt(create_course_state(course_params, anchor_date))
        assert course_params.course_url in result["prompt"]

    def test_empty_state_rejected(self):
        """Test that a state without inputs is an error."""
        with pytest.raises(ValueError):
            build_prompt({})


class TestCallModel:
    """Test the generator node."""

    def test_returns_raw_response(self, fake_llm_factory, quiz_spec: QuizSpec):
        """Test that the model text is stored unmodified."""
        state = create_quiz_state(quiz_spec)
        state["prompt"] = "Say hi"

        result = call_model(state, fake_llm_factory("```json\n[]\n```"))

        assert result == {"raw_response": "```json\n[]\n```"}

    def test_requires_prompt(self, fake_llm_factory, quiz_spec: QuizSpec):
        """Test that a missing prompt is an error."""
        with pytest.raises(ValueError):
            call_model(create_quiz_state(quiz_spec), fake_llm_factory("[]"))


class TestNormalizeNodes:
    """Test the normalizer nodes."""

    def test_normalize_quiz(self, quiz_spec: QuizSpec, raw_quiz_response: str):
        """Test that the quiz node stores questions."""
        state = create_quiz_state(quiz_spec)
        state["raw_response"] = raw_quiz_response

        result = normalize_quiz(state)

        assert len(result["questions"]) == 3

    def test_normalize_quiz_warns_on_defaults(
        self, quiz_spec: QuizSpec, caplog: pytest.LogCaptureFixture
    ):
        """Test that defaulted answers and short quizzes are logged."""
        state = create_quiz_state(quiz_spec)
        state["raw_response"] = '[{"question": "Q", "correctAnswer": "??"}]'

        normalize_quiz(state)

        assert "default to 'A'" in caplog.text
        assert "1 of 3 requested" in caplog.text

    def test_normalize_quiz_logs_and_raises(
        self, quiz_spec: QuizSpec, caplog: pytest.LogCaptureFixture
    ):
        """Test that malformed output is logged before propagating."""
        state = create_quiz_state(quiz_spec)
        state["raw_response"] = "not json"

        with pytest.raises(MalformedAIResponse):
            normalize_quiz(state)

        assert "Could not parse quiz response: not json" in caplog.text

    def test_normalize_course(
        self,
        course_params: CourseExtractionParams,
        anchor_date: date,
        raw_course_response: str,
    ):
        """Test that the course node stores course information."""
        state = create_course_state(course_params, anchor_date)
        state["raw_response"] = raw_course_response

        result = normalize_course(state)

        assert result["course_info"].provider == "Coursera"
