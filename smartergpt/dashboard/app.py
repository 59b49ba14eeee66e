"""SmarterGPT: Streamlit UI for the draft / research / resolve pipeline."""

import dataclasses
import sys
from pathlib import Path

# Add project root to path so 'smartergpt' package is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

import streamlit as st

from smartergpt.config import load_settings
from smartergpt.conversation import Conversation
from smartergpt.graph import MISSING_API_KEY, run_smart_pipeline
from smartergpt.state import Message, PipelineResult, Role
from smartergpt.utils.formatter import render_markdown
from smartergpt.utils.validator import validate_question

st.set_page_config(page_title="SmarterGPT", layout="wide")
st.title("SmarterGPT")
st.markdown(
    "Asks the model the same question several times, has it act as a **researcher** "
    "listing the flaws in every answer, then as a **resolver** that picks the best "
    "answer and improves it."
)

st.divider()

settings = load_settings()

question = st.text_area(
    "Enter your question:",
    height=150,
    placeholder="What would you like answered?",
)

number_of_requests = st.slider(
    "Draft answers",
    min_value=1,
    max_value=5,
    value=settings.number_of_requests,
    help="How many times the question is asked before the research stage.",
)


def _render_transcript(messages: tuple[Message, ...]) -> None:
    """Show the dialogue exactly as it was replayed to the model."""
    if not messages:
        st.markdown("*No turns were recorded.*")
        return
    for message in messages:
        speaker = "user" if message.role is Role.USER else "assistant"
        with st.chat_message(speaker):
            st.markdown(message.content)


def _render_result(result: PipelineResult, question: str, messages: tuple[Message, ...]) -> None:
    if result.completed:
        st.success("Resolution complete.")
    elif result.critique:
        st.warning("The research stage failed; no resolution was attempted.")
    else:
        st.error("Drafting failed; research and resolution were skipped.")

    st.subheader("Resolved Answer")
    st.markdown(result.resolution or "*Not reached.*")

    with st.expander("Research", expanded=False):
        st.markdown(result.critique or "*Not reached.*")

    with st.expander("Draft Answers", expanded=False):
        st.markdown(result.drafts or "*Not reached.*")

    with st.expander("Dialogue Transcript", expanded=False):
        _render_transcript(messages)

    st.download_button(
        label="Download answer.md",
        data=render_markdown(result, question),
        file_name="answer.md",
        mime="text/markdown",
    )


if st.button("Ask", type="primary"):
    try:
        validated = validate_question(question)
    except ValueError as exc:
        st.error(str(exc))
        st.stop()

    if not settings.api_key:
        st.error(MISSING_API_KEY)
        st.stop()

    run_settings = dataclasses.replace(settings, number_of_requests=number_of_requests)
    # One conversation per run so concurrent sessions never share a dialogue.
    conversation = Conversation.from_settings(run_settings)

    with st.status("Running drafts, research and resolution...", expanded=False) as status_widget:
        result = run_smart_pipeline(validated, settings=run_settings, conversation=conversation)
        if result.completed:
            status_widget.update(label="Pipeline complete", state="complete")
        else:
            status_widget.update(label="Pipeline stopped early", state="error")

    st.session_state["last_run"] = (result, validated, conversation.messages)

if "last_run" in st.session_state:
    _render_result(*st.session_state["last_run"])
