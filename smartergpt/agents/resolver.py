"""Resolver Agent: picks the best draft using the researcher's feedback and improves it.

The prompt embeds nothing: question, drafts and critique are already in the
conversation the resolver is replying to.
"""

from smartergpt.conversation import Conversation
from smartergpt.state import PipelineState

RESOLVER_PROMPT = """\
You are a resolver tasked with
1. Deciding which of the answers was best based on the researcher's feedback
2. Improving that answer
3. Printing the improved answer in full

Let's work this out in a step by step way to be sure we have the right answer."""


def resolver_node(state: PipelineState, conversation: Conversation) -> dict:
    # A failed resolution still surfaces its diagnostic to the caller.
    result = conversation.submit_turn(RESOLVER_PROMPT)
    return {"resolution": result.text, "status": "done"}
