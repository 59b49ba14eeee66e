"""Drafter Agent: asks the same step-by-step question several times in one dialogue.

Every draft lands in the shared conversation, so the researcher and resolver
later see all of them. The first turn resets the dialogue.
"""

import sys

from smartergpt.conversation import Conversation
from smartergpt.state import PipelineState

DRAFT_PROMPT = """\
Question: {question}

Let's work this out in a step by step way to be sure we have the right answer."""


def build_draft_prompt(question: str) -> str:
    return DRAFT_PROMPT.format(question=question)


def drafter_node(state: PipelineState, conversation: Conversation, number_of_requests: int = 3) -> dict:
    """Drafting node for the LangGraph StateGraph.

    Submits `number_of_requests` identical turns and labels each reply
    "Answer <i>:". A failed turn does not stop the loop, but marks the
    stage as failed once all turns have been attempted.
    """
    prompt = build_draft_prompt(state["question"])

    answers = []
    failed = False
    for i in range(number_of_requests):
        result = conversation.submit_turn(prompt, reset=(i == 0))
        if result.failed:
            failed = True
        answers.append(f"Answer {i + 1}:\n{result.text}")

    if failed:
        print("[SmartGPT] Drafting failed; skipping research and resolution.", file=sys.stderr)

    return {
        "drafts": "\n\n".join(answers),
        "status": "drafting_failed" if failed else "in_progress",
    }
