"""
Main Streamlit application for YouTube transcription with Khmer summaries.
"""

import os
import streamlit as st
from dotenv import load_dotenv

from khmerscribe.frontend.api_client import ApiClient
from khmerscribe.frontend.components import header, sidebar, youtube_input, display_state
from khmerscribe.frontend.state import ConsumerState, StreamConsumer


load_dotenv()

DEFAULT_API_URL = os.getenv("API_URL", "http://localhost:8000")


def init_session_state():
    """Initialize session state variables."""
    if "consumer_state" not in st.session_state:
        st.session_state.consumer_state = ConsumerState()

    if "processing" not in st.session_state:
        st.session_state.processing = False

    if "pending_url" not in st.session_state:
        st.session_state.pending_url = None


def run_job(url: str, placeholder):
    """
    Stream one job, redrawing ``placeholder`` after every event.

    Args:
        url: YouTube URL
        placeholder: st.empty() slot for the results
    """
    client = ApiClient(st.session_state.get("api_url", DEFAULT_API_URL))

    def render(state: ConsumerState):
        with placeholder.container():
            display_state(state)

    consumer = StreamConsumer(client, st.session_state.consumer_state, on_update=render)
    consumer.submit(url)


def main():
    """Main application entry point."""
    header()
    sidebar(DEFAULT_API_URL)
    init_session_state()

    url, submitted = youtube_input(disabled=st.session_state.processing)

    # Rerun once so the form is drawn disabled while the job streams
    if submitted and not st.session_state.processing:
        st.session_state.pending_url = url or ""
        st.session_state.processing = True
        st.rerun()

    placeholder = st.empty()

    if st.session_state.processing:
        try:
            run_job(st.session_state.pending_url, placeholder)
        finally:
            st.session_state.processing = False
            st.session_state.pending_url = None
        st.rerun()

    with placeholder.container():
        display_state(st.session_state.consumer_state)


if __name__ == "__main__":
    main()
