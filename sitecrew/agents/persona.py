"""Persona Agent — one crew member's short perspective on the request.

Each persona sees the request header plus every earlier contribution, never a
later one: the context string only grows after a persona has spoken.
"""

import sys

from sitecrew.errors import PersonaStageError, ServiceError
from sitecrew.personas import Persona
from sitecrew.state import CrewState


def build_context_header(goal: str, references: list[str]) -> str:
    """Opening block of the transcript: the request and any reference materials."""
    header = f"Website Request: {goal}\n\n"
    if references:
        header += f"Reference materials provided: {', '.join(references)}\n\n"
    return header


def build_persona_prompt(context: str, persona: Persona) -> str:
    """Construct the user prompt for one persona from the transcript so far."""
    return (
        f"{context}\nBased on the request and any previous team inputs, "
        f"provide your {persona.name} perspective."
    )


def make_persona_node(persona: Persona, service, max_tokens: int):
    """Return a graph node that asks ``persona`` for its contribution."""

    def persona_node(state: CrewState) -> dict:
        print(f"[SiteCrew] Getting response from {persona.name}...", file=sys.stderr)
        prompt = build_persona_prompt(state["context"], persona)
        try:
            message = service.complete(persona.directive, prompt, max_tokens)
        except ServiceError as exc:
            raise PersonaStageError(persona.name, exc) from exc

        return {
            "discussion": state["discussion"] + [{"agent": persona.name, "message": message}],
            "context": state["context"] + f"{persona.name}: {message}\n\n",
        }

    persona_node.__name__ = f"{persona.name.lower()}_node"
    return persona_node
