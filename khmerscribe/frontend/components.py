"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Optional, Tuple

from khmerscribe.frontend.state import ConsumerState
from khmerscribe.models.schemas import ProcessingStep


STEP_MESSAGES = {
    ProcessingStep.DOWNLOADING: "Downloading audio from YouTube...",
    ProcessingStep.TRANSCRIBING: "Transcribing audio with Whisper...",
    ProcessingStep.CLEANING: "Removing sponsors and filler content...",
    ProcessingStep.SUMMARIZING: "Generating Khmer summary...",
    ProcessingStep.COMPLETE: "Processing complete!",
}


def step_message(step: ProcessingStep) -> str:
    """Status line for a processing step."""
    return STEP_MESSAGES.get(step, "")


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="YouTube Transcription",
        page_icon="🎬",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("🎬 YouTube Transcription")
    st.markdown("""
    Convert YouTube videos to text with AI-powered transcription, automatically remove sponsors
    and filler content, then get a structured summary in Khmer language.
    """)
    st.divider()


def sidebar(default_api_url: str):
    """Display the sidebar with app information and options."""
    with st.sidebar:
        st.title("YouTube Transcription")

        st.markdown("## About")
        st.info("""
        Each video goes through four steps:
        - Download the audio
        - Transcribe it with Whisper
        - Remove sponsors and filler
        - Summarize it in Khmer
        """)

        st.markdown("## Settings")
        st.text_input("API URL", value=default_api_url, key="api_url")


def youtube_input(disabled: bool = False) -> Tuple[Optional[str], bool]:
    """
    Display the YouTube URL form.

    Args:
        disabled: Lock the form while a job is in flight

    Returns:
        The entered URL and whether the form was submitted
    """
    with st.form(key="youtube_form"):
        st.markdown("### Enter YouTube URL")
        url = st.text_input(
            "Paste the URL of the YouTube video you want to transcribe",
            placeholder="https://www.youtube.com/watch?v=...",
            disabled=disabled,
        )
        submit = st.form_submit_button(
            "Processing" if disabled else "Process Video",
            disabled=disabled,
        )

    return url, submit


def display_state(state: ConsumerState):
    """
    Render status line, error, transcript and summary.

    Args:
        state: Current consumer state
    """
    if state.error:
        st.error(state.error)

    if state.is_processing:
        st.info(f"⏳ {step_message(state.step)}")
    elif state.step == ProcessingStep.COMPLETE:
        st.success(step_message(state.step))

    if state.transcription:
        st.markdown("### 📄 Transcription")
        st.caption("Original transcription with sponsors and filler removed")
        with st.container(height=400):
            st.text(state.transcription)

    if state.summary:
        st.markdown("### 🌐 Khmer Summary")
        st.caption("Structured summary in Khmer language")
        st.markdown(state.summary)
