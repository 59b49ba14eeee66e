"""Researcher Agent: lists the logical flaws in each draft answer."""

import sys

from smartergpt.conversation import Conversation
from smartergpt.state import PipelineState

RESEARCHER_PROMPT = """\
Question: {question}

{drafts}

You are a researcher tasked with investigating the answers given above. \
List the logical flaws, if there are any, in each answer. \
Let's work this out in a step by step way to be sure we have all the errors."""


def build_researcher_prompt(question: str, drafts: str) -> str:
    return RESEARCHER_PROMPT.format(question=question, drafts=drafts)


def researcher_node(state: PipelineState, conversation: Conversation) -> dict:
    """Research node: one turn critiquing the drafts already in the dialogue."""
    prompt = build_researcher_prompt(state["question"], state["drafts"])
    result = conversation.submit_turn(prompt)

    if result.failed:
        print("[SmartGPT] Research failed; skipping resolution.", file=sys.stderr)
        return {"critique": result.text, "status": "critique_failed"}

    return {"critique": result.text}
