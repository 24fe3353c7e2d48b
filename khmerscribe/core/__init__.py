"""
Core functionality for the transcription service.

This package contains the pipeline orchestrator and the clients for the
services it drives: YouTube audio download, speech-to-text and text generation.
"""
