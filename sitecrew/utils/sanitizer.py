"""Artifact sanitizer — strips code fences and provenance comments from model output."""

import re

# Provenance vocabulary, matched case-insensitively on word boundaries.
_PROVENANCE_TERMS = (
    r"AI",
    r"A\.I\.",
    r"auto-generated",
    r"generated",
    r"automated",
    r"GPT",
    r"ChatGPT",
    r"OpenAI",
    r"Claude",
    r"Gemini",
    r"LLM",
    r"language\s+model",
    r"Lovable",
    r"Copilot",
)
_TERM = r"\b(?:" + "|".join(_PROVENANCE_TERMS) + r")(?!\w)"

_LEADING_FENCE_RE = re.compile(r"\A```[\w+-]*[ \t]*\n?")
_TRAILING_FENCE_RE = re.compile(r"\n?[ \t]*```\Z")

_MARKUP_COMMENT_RE = re.compile(
    r"<!--(?:(?!-->).)*?" + _TERM + r"(?:(?!-->).)*?-->",
    re.IGNORECASE | re.DOTALL,
)
_BLOCK_COMMENT_RE = re.compile(
    r"/\*(?:(?!\*/).)*?" + _TERM + r"(?:(?!\*/).)*?\*/",
    re.IGNORECASE | re.DOTALL,
)
# Line comments open at line start or after whitespace, ";", "{" or "}";
# "//" anywhere else belongs to a URL.
_LINE_COMMENT_RE = re.compile(
    r"(?:^|(?<=[\s;{}]))//[^\n]*?" + _TERM + r"[^\n]*",
    re.IGNORECASE | re.MULTILINE,
)


def strip_fences(text: str) -> str:
    """Strip a surrounding markdown code fence if present.

    The leading and trailing markers are removed independently: a reply cut
    off by the output budget may open a fence without closing it.
    """
    text = text.strip()
    text = _LEADING_FENCE_RE.sub("", text, count=1)
    text = _TRAILING_FENCE_RE.sub("", text, count=1)
    return text.strip()


def strip_provenance_comments(text: str) -> str:
    """Remove comment spans that mention generation tooling or models."""
    text = _MARKUP_COMMENT_RE.sub("", text)
    text = _BLOCK_COMMENT_RE.sub("", text)
    text = _LINE_COMMENT_RE.sub("", text)
    return text


def sanitize_artifact(text: str) -> str:
    """Return the model's document with wrapper and provenance artifacts removed.

    Applied until the text stops changing, so sanitizing twice is a no-op.
    """
    current = text or ""
    while True:
        cleaned = strip_provenance_comments(strip_fences(current)).strip()
        if cleaned == current:
            return cleaned
        current = cleaned
