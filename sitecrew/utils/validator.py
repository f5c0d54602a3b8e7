"""Input validation — checks the request before any completion call is made."""

from sitecrew.errors import ValidationError


def validate_goal(goal: str) -> str:
    """Validate that the goal is a non-empty string.

    Returns the stripped input on success.
    Raises ValidationError if input is empty or whitespace-only.
    """
    if not isinstance(goal, str) or not goal.strip():
        raise ValidationError("Goal must be a non-empty string.")
    return goal.strip()


def validate_references(references) -> list[str]:
    """Validate the reference annotations. None means no references.

    Any number of references is accepted; callers that want a cap enforce it
    themselves.
    """
    if references is None:
        return []
    if not isinstance(references, (list, tuple)):
        raise ValidationError("References must be a list of strings.")
    for i, ref in enumerate(references):
        if not isinstance(ref, str):
            raise ValidationError(f"Reference {i} must be a string.")
    return list(references)
