"""Output Formatter: renders a pipeline result as a Markdown report."""

from pathlib import Path

from smartergpt.config import get_config
from smartergpt.state import PipelineResult

_NOT_REACHED = "_Not reached: an earlier stage failed._"


def render_markdown(result: PipelineResult, question: str = "") -> str:
    """Convert a PipelineResult into a Markdown report."""
    lines = ["# SmarterGPT Answer", ""]

    if question:
        lines.append("## Question")
        lines.append("")
        lines.append(question)
        lines.append("")

    sections = [
        ("Resolved Answer", result.resolution),
        ("Research", result.critique),
        ("Draft Answers", result.drafts),
    ]
    for title, body in sections:
        lines.append(f"## {title}")
        lines.append("")
        lines.append(body if body else _NOT_REACHED)
        lines.append("")

    return "\n".join(lines)


def write_result(result: PipelineResult, question: str = "", output_path: str | Path | None = None) -> Path:
    """Write the Markdown report to disk and return its path.

    Falls back to `output_path` from config.yaml when no path is given.
    """
    if output_path is None:
        output_path = get_config().get("output_path", "./output/answer.md")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(render_markdown(result, question), encoding="utf-8")
    return output_path
