"""LangGraph workflow and state management."""

# Note: Avoid importing workflow here to prevent circular imports
# Import directly from modules as needed:
# from src.graph.state import GenerationState, create_quiz_state
# from src.graph.workflow import compile_quiz_workflow, generate_quiz

__all__ = [
    "GenerationState",
    "create_quiz_state",
    "create_course_state",
    "compile_quiz_workflow",
    "compile_course_workflow",
    "generate_quiz",
    "extract_course_info",
]
