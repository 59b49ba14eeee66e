"""LangGraph StateGraph definition for the draft → research → resolve pipeline."""

import sys

from langgraph.graph import END, StateGraph

from smartergpt.agents.drafter import drafter_node
from smartergpt.agents.researcher import researcher_node
from smartergpt.agents.resolver import resolver_node
from smartergpt.config import Settings, load_settings
from smartergpt.conversation import Conversation
from smartergpt.state import PipelineResult, PipelineState

MISSING_API_KEY = "OpenAI API key not configured"


def _route_after_drafting(state: PipelineState) -> str:
    """Conditional edge: a failed drafting stage ends the run."""
    if state["status"] == "drafting_failed":
        return "end"
    return "researcher"


def _route_after_research(state: PipelineState) -> str:
    """Conditional edge: a failed research stage ends the run."""
    if state["status"] == "critique_failed":
        return "end"
    return "resolver"


def build_graph(conversation: Conversation, number_of_requests: int = 3):
    """Compile the pipeline graph with every node bound to `conversation`."""
    workflow = StateGraph(PipelineState)

    workflow.add_node(
        "drafter",
        lambda state: drafter_node(state, conversation, number_of_requests),
    )
    workflow.add_node("researcher", lambda state: researcher_node(state, conversation))
    workflow.add_node("resolver", lambda state: resolver_node(state, conversation))

    workflow.set_entry_point("drafter")

    workflow.add_conditional_edges(
        "drafter",
        _route_after_drafting,
        {"end": END, "researcher": "researcher"},
    )
    workflow.add_conditional_edges(
        "researcher",
        _route_after_research,
        {"end": END, "resolver": "resolver"},
    )
    workflow.add_edge("resolver", END)

    return workflow.compile()


def run_smart_pipeline(
    question: str,
    settings: Settings | None = None,
    conversation: Conversation | None = None,
) -> PipelineResult:
    """Run drafting, research and resolution for one question.

    Args:
        question: The user's question.
        settings: Overrides the settings loaded from config.yaml and the environment.
        conversation: Dialogue to run in. A fresh one is built from settings when
            omitted, so concurrent runs never share a log.

    Never raises for provider failures: a failed stage returns the partial result.
    """
    settings = settings or load_settings()
    if not settings.api_key:
        print(f"[SmartGPT] {MISSING_API_KEY}", file=sys.stderr)
        return PipelineResult(MISSING_API_KEY, MISSING_API_KEY, MISSING_API_KEY)

    if conversation is None:
        conversation = Conversation.from_settings(settings)

    state: PipelineState = {
        "question": question,
        "drafts": "",
        "critique": "",
        "resolution": "",
        "status": "in_progress",
    }
    graph = build_graph(conversation, settings.number_of_requests)
    final_state = graph.invoke(state)

    return PipelineResult(
        drafts=final_state["drafts"],
        critique=final_state["critique"],
        resolution=final_state["resolution"],
    )
