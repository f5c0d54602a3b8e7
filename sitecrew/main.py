"""Entry point: validates input, runs the crew, writes the generated site."""

import sys

from sitecrew.errors import PipelineError, ValidationError
from sitecrew.graph import get_orchestrator
from sitecrew.utils.formatter import write_site

USAGE = "Usage: sitecrew [--ref TEXT]... [--output PATH] [GOAL...]"


def _parse_args(args: list[str]) -> tuple[list[str], list[str], str | None]:
    """Split argv into goal words, --ref values and an optional --output path."""
    words = []
    references = []
    output_path = None

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--ref", "--output"):
            if i + 1 >= len(args):
                raise ValidationError(f"{arg} needs a value.\n{USAGE}")
            if arg == "--ref":
                references.append(args[i + 1])
            else:
                output_path = args[i + 1]
            i += 2
            continue
        words.append(arg)
        i += 1

    return words, references, output_path


def run(goal: str, references: list[str] | None = None, output_path: str | None = None) -> None:
    """Run the full pipeline on a goal string and write the result to disk.

    Args:
        goal: The user's description of the website.
        references: Annotations describing attached reference files.
        output_path: Override for the HTML output path. None uses config default.
    """
    references = references or []
    result = get_orchestrator().run(goal, references)

    for contribution in result.discussion:
        print(f"\n[{contribution['agent']}]\n{contribution['message'].strip()}")

    path = write_site(result, goal.strip(), references, output_path)
    print(f"\n[SiteCrew] Contributions: {len(result.discussion)}")
    print(f"[SiteCrew] Output written to: {path}")


def main() -> None:
    """CLI entry point — accepts the goal as arguments or from stdin."""
    try:
        words, references, output_path = _parse_args(sys.argv[1:])
        if words:
            goal = " ".join(words)
        else:
            print("Describe your website (Ctrl+D / Ctrl+Z to submit):")
            goal = sys.stdin.read()
        run(goal, references, output_path)
    except ValidationError as exc:
        print(f"[SiteCrew] {exc}", file=sys.stderr)
        sys.exit(2)
    except PipelineError as exc:
        print(f"[SiteCrew] Generation failed: {exc}", file=sys.stderr)
        sys.exit(1)
    except Exception as exc:
        print(f"[SiteCrew] Generation failed: {exc!r}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
