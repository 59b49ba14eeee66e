"""Input validation: checks that the question is a non-empty string before the pipeline runs."""


def validate_question(question: str) -> str:
    """Validate that the question is a non-empty string.

    Returns the stripped input on success.
    Raises ValueError if input is empty or whitespace-only.
    """
    if not isinstance(question, str) or not question.strip():
        raise ValueError("Please send a valid question")
    return question.strip()
