"""Crew State — single source of truth passed through the graph."""

from typing import NamedTuple, TypedDict


class Contribution(TypedDict):
    agent: str  # Persona name.
    message: str  # Persona output. Immutable once appended.


class CrewState(TypedDict):
    goal: str  # Original user request. Immutable after init.
    references: list[str]  # Reference file annotations, in upload order.
    discussion: list[Contribution]  # Persona contributions, in call order.
    context: str  # Growing transcript text re-sent to every later call.
    code: str  # Sanitized artifact. Empty until the synthesis node runs.


class RunResult(NamedTuple):
    discussion: list[Contribution]
    code: str

    def to_dict(self) -> dict:
        """Wire shape returned by the HTTP boundary."""
        return {
            "discussion": [dict(c) for c in self.discussion],
            "code": self.code,
        }
