"""Output Formatter — writes the generated site and a Markdown transcript of the discussion."""

from pathlib import Path

from sitecrew.config import get_config
from sitecrew.state import Contribution, RunResult

TRANSCRIPT_NAME = "discussion.md"


def render_discussion(discussion: list[Contribution], goal: str = "", references: list[str] | None = None) -> str:
    """Convert the crew discussion into a Markdown transcript."""
    lines = ["# Team Discussion", ""]

    if goal:
        lines.append("## Request")
        lines.append("")
        lines.append(goal)
        lines.append("")

    if references:
        lines.append("## Reference Materials")
        lines.append("")
        for ref in references:
            lines.append(f"- {ref}")
        lines.append("")

    if discussion:
        lines.append("## Contributions")
        lines.append("")
        for contribution in discussion:
            lines.append(f"### {contribution['agent']}")
            lines.append("")
            lines.append(contribution["message"].strip() or "*No response.*")
            lines.append("")

    return "\n".join(lines)


def write_site(
    result: RunResult,
    goal: str = "",
    references: list[str] | None = None,
    output_path: str | Path | None = None,
) -> Path:
    """Write the generated document to disk with the transcript beside it.

    Returns the path of the written HTML file.
    """
    if output_path is None:
        output_path = get_config().get("output_path", "./output/index.html")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(result.code + "\n", encoding="utf-8")
    transcript = render_discussion(result.discussion, goal, references)
    (output_path.parent / TRANSCRIPT_NAME).write_text(transcript, encoding="utf-8")
    return output_path
