"""Entry point: validates input, runs the pipeline, writes the Markdown report."""

import dataclasses
import sys

from smartergpt.config import load_settings
from smartergpt.graph import run_smart_pipeline
from smartergpt.utils.formatter import write_result
from smartergpt.utils.validator import validate_question


def run(question: str, number_of_requests: int | None = None, output_path: str | None = None, write: bool = True) -> None:
    """Run the full pipeline on a question and print every stage.

    Args:
        question: The user's question.
        number_of_requests: Override for the draft count. None uses config default.
        output_path: Override for the report path. None uses config default.
        write: Whether to write the Markdown report.
    """
    validated = validate_question(question)

    settings = load_settings()
    if number_of_requests is not None:
        settings = dataclasses.replace(settings, number_of_requests=number_of_requests)

    result = run_smart_pipeline(validated, settings=settings)

    print("\n--- Drafts ---\n")
    print(result.drafts)
    print("\n--- Research ---\n")
    print(result.critique or "(not reached)")
    print("\n--- Resolution ---\n")
    print(result.resolution or "(not reached)")

    if write:
        path = write_result(result, validated, output_path)
        print(f"\n[SmartGPT] Output written to: {path}")


def main() -> None:
    """CLI entry point: accepts the question as argument or from stdin."""
    args = sys.argv[1:]
    number_of_requests = None
    output_path = None
    write = True

    if "--no-write" in args:
        write = False
        args.remove("--no-write")

    if "--requests" in args:
        idx = args.index("--requests")
        try:
            number_of_requests = int(args[idx + 1])
        except (IndexError, ValueError):
            print("--requests needs a whole number.", file=sys.stderr)
            sys.exit(2)
        if number_of_requests < 1:
            print("--requests needs to be at least 1.", file=sys.stderr)
            sys.exit(2)
        del args[idx:idx + 2]

    if "--output" in args:
        idx = args.index("--output")
        if idx + 1 >= len(args):
            print("--output needs a path.", file=sys.stderr)
            sys.exit(2)
        output_path = args[idx + 1]
        del args[idx:idx + 2]

    if args:
        question = " ".join(args)
    else:
        print("Enter your question (Ctrl+D / Ctrl+Z to submit):")
        question = sys.stdin.read()

    try:
        run(question, number_of_requests=number_of_requests, output_path=output_path, write=write)
    except ValueError as exc:
        print(f"[SmartGPT] {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
