"""LangGraph workflow definitions for quiz generation and course extraction."""

from datetime import date
from typing import Any

from langchain_core.language_models import BaseChatModel
from langgraph.graph import END, StateGraph

from src.agents.generator import call_model
from src.agents.normalizer import normalize_course, normalize_quiz
from src.agents.prompter import build_prompt
from src.graph.state import GenerationState, create_course_state, create_quiz_state
from src.models.course import CourseExtractionParams, CourseInfo
from src.models.quiz import QuizQuestion, QuizSpec


def _create_workflow(llm: BaseChatModel, normalizer) -> StateGraph:
    """Prompter -> Generator -> Normalizer, with the model bound to the generator."""

    def generator(state: GenerationState) -> dict[str, Any]:
        return call_model(state, llm)

    workflow = StateGraph(GenerationState)

    workflow.add_node("prompter", build_prompt)
    workflow.add_node("generator", generator)
    workflow.add_node("normalizer", normalizer)

    workflow.set_entry_point("prompter")
    workflow.add_edge("prompter", "generator")
    workflow.add_edge("generator", "normalizer")
    workflow.add_edge("normalizer", END)

    return workflow


def create_quiz_workflow(llm: BaseChatModel) -> StateGraph:
    """
    Create the quiz generation workflow.

    The workflow follows this structure:
    1. Prompter - Builds the quiz prompt
    2. Generator - Calls the injected model once
    3. Normalizer - Sanitizes, extracts and coerces questions

    Args:
        llm: Chat model used by the generator node

    Returns:
        Uncompiled StateGraph
    """
    return _create_workflow(llm, normalize_quiz)


def create_course_workflow(llm: BaseChatModel) -> StateGraph:
    """
    Create the course extraction workflow.

    Same shape as the quiz workflow; the normalizer validates required
    fields and schedules milestone deadlines.

    Args:
        llm: Chat model used by the generator node

    Returns:
        Uncompiled StateGraph
    """
    return _create_workflow(llm, normalize_course)


def compile_quiz_workflow(llm: BaseChatModel):
    """Compile the quiz workflow and return it ready for execution."""
    return create_quiz_workflow(llm).compile()


def compile_course_workflow(llm: BaseChatModel):
    """Compile the course workflow and return it ready for execution."""
    return create_course_workflow(llm).compile()


def generate_quiz(llm: BaseChatModel, spec: QuizSpec) -> list[QuizQuestion]:
    """
    Run the quiz workflow for one request.

    Raises:
        MalformedAIResponse: If the model output holds no JSON array
    """
    final_state = compile_quiz_workflow(llm).invoke(create_quiz_state(spec))
    return final_state["questions"]


def extract_course_info(
    llm: BaseChatModel,
    params: CourseExtractionParams,
    anchor_date: date | None = None,
) -> CourseInfo:
    """
    Run the course workflow for one request.

    Args:
        llm: Chat model
        params: Course URL and pace
        anchor_date: Schedule start, today when omitted

    Raises:
        MalformedAIResponse: If the model output holds no JSON object
        MissingRequiredFields: If required course keys are absent
    """
    state = create_course_state(params, anchor_date or date.today())
    final_state = compile_course_workflow(llm).invoke(state)
    return final_state["course_info"]
