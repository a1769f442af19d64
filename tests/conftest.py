"""Shared test fixtures."""

import pytest


class ScriptedAsk:
    """Stand-in prompter that replays canned answers and records the prompts."""

    def __init__(self, answers: list[str] | None = None):
        self.answers = list(answers or [])
        self.prompts: list[str] = []

    def __call__(self, text: str) -> str:
        self.prompts.append(text)
        return self.answers.pop(0) if self.answers else ""


@pytest.fixture
def scripted_ask():
    return ScriptedAsk


PROBE_JSON = {
    "streams": [
        {
            "codec_type": "video",
            "codec_name": "h264",
            "avg_frame_rate": "30/1",
            "r_frame_rate": "30/1",
        },
        {
            "codec_type": "audio",
            "codec_name": "aac",
        },
    ],
}


@pytest.fixture
def probe_json() -> dict:
    return PROBE_JSON
