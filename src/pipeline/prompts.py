"""Prompt builders for quiz generation and course extraction."""

from src.models.course import CourseExtractionParams
from src.models.quiz import QuizSpec

DIFFICULTY_INSTRUCTIONS = {
    "easy": "Questions should test core definitions and widely known facts.",
    "medium": "Questions should require applying concepts, not just recalling them.",
    "hard": "Questions should explore edge cases, trade-offs and deeper reasoning.",
}


def build_quiz_prompt(spec: QuizSpec) -> str:
    """
    Build the quiz generation prompt.

    The question count is clamped to MAX_QUIZ_QUESTIONS; callers should use
    spec.effective_question_count when displaying or validating the quiz.

    Args:
        spec: Quiz request parameters

    Returns:
        Prompt text asking for a bare JSON array of questions
    """
    count = spec.effective_question_count
    difficulty = spec.difficulty.value

    return f"""Create {count} multiple choice questions about "{spec.entity_name}" at {difficulty} difficulty.
{DIFFICULTY_INSTRUCTIONS[difficulty]}

Format as a JSON array: [{{"question": "...", "options": ["...", "...", "...", "..."], "correctAnswer": "A"}}]

IMPORTANT RULES:
1. Output ONLY the JSON array. No markdown formatting (no ```json blocks), no explanations.
2. Return exactly {count} objects.
3. "question" must be a string.
4. "options" must be an array of exactly 4 strings, in order A, B, C, D.
5. "correctAnswer" must be a single letter: "A", "B", "C" or "D".
6. Make questions challenging and diverse."""


def build_course_extraction_prompt(params: CourseExtractionParams) -> str:
    """
    Build the course information extraction prompt.

    Deadlines are deliberately left out of the requested structure; they are
    computed afterwards from the duration and an explicit anchor date.

    Args:
        params: Course URL and study pace

    Returns:
        Prompt text asking for a bare JSON object
    """
    return f"""You are a helpful course information extraction tool. I need you to generate structured information about the following course URL: "{params.course_url}".

Your task is to output ONLY a valid JSON object with the following structure:
{{
  "name": "Course Name",
  "provider": "Provider Name",
  "duration": "Duration in weeks",
  "pace": "{params.pace}",
  "objectives": ["Objective 1", "Objective 2", "Objective 3"],
  "milestones": [
    {{"name": "Milestone 1"}},
    {{"name": "Milestone 2"}}
  ],
  "prerequisites": ["Prerequisite 1", "Prerequisite 2"],
  "mainSkills": ["Skill 1", "Skill 2", "Skill 3"]
}}

IMPORTANT RULES:
1. Output ONLY the JSON object. No markdown formatting (no ```json blocks), no explanations.
2. Every property must be included and must not be null or empty.
3. "name", "provider", "duration", and "pace" must be strings.
4. "objectives", "prerequisites", "mainSkills" must be arrays of strings.
5. "milestones" must be an array of objects, each with a "name" property.
6. Do not include deadline properties in milestones.
7. Provide at least 3 items in objectives, milestones, and mainSkills arrays.
8. Keep fields exactly as named in the example - don't rename any properties."""
