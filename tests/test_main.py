"""
Tests for the command line runner.
"""

import asyncio

from khmerscribe.main import process_video
from khmerscribe.utils.error_handling import UpstreamError


def test_process_video_returns_completed_event(pipeline, test_video_url, capsys):
    result = asyncio.run(process_video(pipeline, test_video_url))

    assert result.is_terminal
    assert result.step == "complete"
    assert result.summary == "សេចក្តីសង្ខេប៖ គំនិតសំខាន់គឺការធ្វើតេស្ត។"

    printed = capsys.readouterr().out
    assert "The main idea is testing." in printed
    assert "Khmer summary" in printed


def test_process_video_returns_error_event(pipeline, test_video_url, mock_generator):
    mock_generator.summarize.side_effect = UpstreamError("model overloaded")

    result = asyncio.run(process_video(pipeline, test_video_url))

    assert result.is_terminal
    assert result.error == "model overloaded"
    assert result.summary is None
