"""Synthesizer Agent — turns the request and the team discussion into one HTML file."""

import sys

from sitecrew.errors import ServiceError, SynthesisStageError
from sitecrew.state import Contribution, CrewState
from sitecrew.utils.sanitizer import sanitize_artifact

SYSTEM_PROMPT = (
    "You are an expert web developer creating production-ready websites. "
    "Generate clean, professional HTML/CSS/JS code. Never include comments about AI, "
    "generation tools, or how the code was made. The code should look like it was "
    "written by a professional developer. Return only code, no markdown formatting."
)

REQUIREMENTS = """\
CRITICAL REQUIREMENTS:
1. Generate a complete, single-file HTML website
2. Must be fully responsive and mobile-friendly
3. Use modern, professional styling with CSS variables
4. Include smooth animations and transitions
5. Use semantic HTML5 elements
6. Include a beautiful, cohesive color scheme
7. Have proper typography hierarchy
8. DO NOT include any comments mentioning AI, generated, or any tool names
9. DO NOT include any meta tags or comments about how the code was created
10. Make it look like hand-crafted professional code
11. Use realistic company/brand names if needed (not placeholder text)

Return ONLY the clean HTML code starting with <!DOCTYPE html>. \
No explanations, no markdown, no comments about generation."""


def build_synthesis_prompt(goal: str, discussion: list[Contribution], references: list[str]) -> str:
    """Construct the final code-generation prompt from the request and transcript."""
    discussion_summary = "\n".join(f"{c['agent']}: {c['message']}" for c in discussion)
    reference_info = ""
    if references:
        reference_info = "\n\nREFERENCE FILES PROVIDED:\n" + "\n".join(references)

    return (
        "Based on the following user request and team discussion, generate a complete, "
        "professional HTML website with embedded CSS and JavaScript.\n\n"
        f"USER REQUEST: {goal}{reference_info}\n\n"
        f"TEAM DISCUSSION:\n{discussion_summary}\n\n"
        f"{REQUIREMENTS}"
    )


def make_synthesis_node(service, max_tokens: int):
    """Return the graph node that generates and sanitizes the final document."""

    def synthesis_node(state: CrewState) -> dict:
        print("[SiteCrew] Team discussion complete, generating code...", file=sys.stderr)
        prompt = build_synthesis_prompt(state["goal"], state["discussion"], state["references"])
        try:
            raw = service.complete(SYSTEM_PROMPT, prompt, max_tokens)
        except ServiceError as exc:
            raise SynthesisStageError(exc) from exc

        return {"code": sanitize_artifact(raw)}

    return synthesis_node
