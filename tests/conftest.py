"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- API key handling (set / cleared on the global settings)
- Fake Gemini clients (no network calls, ever)
- Gateways wired to those fakes
- Test client (FastAPI TestClient)
- Sample inputs and sample model outputs for the operations
"""

import base64
import json
from types import SimpleNamespace
from typing import Any, Callable, Dict, Generator, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from creatortune.core.config import settings
from creatortune.main import app
from creatortune.deps import get_gateway
from creatortune.ai.gateway import GenerationGateway
from creatortune.ai.providers.gemini import GeminiProvider, _build_client


# ---------------------------------------------------------------------------
# CREDENTIAL FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def api_key(monkeypatch) -> str:
    """Configure a dummy API key for the duration of the test."""
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "test-key")
    _build_client.cache_clear()
    yield "test-key"
    _build_client.cache_clear()


@pytest.fixture
def no_api_key(monkeypatch) -> None:
    """Clear the API key for the duration of the test."""
    monkeypatch.setattr(settings, "GEMINI_API_KEY", "")
    _build_client.cache_clear()


# ---------------------------------------------------------------------------
# FAKE GEMINI CLIENT
# ---------------------------------------------------------------------------

def make_fake_client(text: Optional[str] = None, error: Optional[Exception] = None) -> MagicMock:
    """
    Build a stand-in for genai.Client.

    client.aio.models.generate_content is an AsyncMock that returns an object
    with .text, or raises ``error``.
    """
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=SimpleNamespace(text=text, usage_metadata=None),
        side_effect=error,
    )
    return client


@pytest.fixture
def fake_client_factory() -> Callable[..., MagicMock]:
    return make_fake_client


@pytest.fixture
def gateway_for() -> Callable[[MagicMock], GenerationGateway]:
    """Factory: a gateway whose client factory always returns the given fake."""
    def _build(client: MagicMock) -> GenerationGateway:
        return GenerationGateway(
            provider=GeminiProvider(model="gemini-test"),
            client_factory=lambda: client,
        )
    return _build


# ---------------------------------------------------------------------------
# IMAGE FIXTURES
# ---------------------------------------------------------------------------

def make_data_url(size: int, mime_type: str = "image/png", fill: bytes = b"\x00") -> str:
    """A data URL whose payload decodes to exactly ``size`` bytes."""
    payload = base64.b64encode(fill * size).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


@pytest.fixture
def data_url() -> Callable[..., str]:
    return make_data_url


# ---------------------------------------------------------------------------
# HTTP FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def client_with_gateway() -> Generator[Callable[[GenerationGateway], TestClient], None, None]:
    """
    Factory for a TestClient whose get_gateway dependency is overridden.

    Overrides are cleared after the test.
    """
    def _build(gw: GenerationGateway) -> TestClient:
        app.dependency_overrides[get_gateway] = lambda: gw
        return TestClient(app)

    yield _build
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# SAMPLE INPUTS
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_inputs() -> Dict[str, Dict[str, Any]]:
    """Valid inputs for every operation, keyed by operation name."""
    channel = {"channel_url": "https://www.youtube.com/@ThriftyHomestead"}
    return {
        "channel_audit": dict(channel),
        "content_strategy": dict(channel),
        "title_thumbnail": {
            "title": "I Tried Living on $5 a Day",
            "thumbnail": {"data_url": make_data_url(64), "mime_type": "image/png"},
        },
        "ab_test": {
            "title_a": "I Tried Living on $5 a Day",
            "image_a": {"data_url": make_data_url(32, fill=b"A"), "mime_type": "image/png"},
            "title_b": "$5 a Day for a Week (Here's What Happened)",
            "image_b": {"data_url": make_data_url(32, "image/jpeg", fill=b"B"), "mime_type": "image/jpeg"},
            "target_audience": "Budget-conscious millennials",
        },
        "audience_profile": {
            "titles": "Frugal Grocery Haul; Building a Chicken Coop for $50",
            "descriptions": "We shop for a family of four---We build a coop from pallets",
            "about": "Frugal living and homesteading tips every week.",
        },
        "content_calendar": {
            "niche": "Frugal living",
            "top_titles": "Frugal Grocery Haul, Pantry Challenge",
        },
        "branding_review": {
            "name": "Thrifty Homestead",
            "handle": "@thriftyhomestead",
            "pfp_description": "Smiling couple in front of a barn",
            "banner_description": "Green fields with the channel name in white serif",
            "about": "Frugal living and homesteading tips every week.",
            "titles": "Frugal Grocery Haul; Pantry Challenge",
        },
        "about_section": {"about_text": "Hi! We post videos about saving money on the farm."},
        "engagement_hacks": {
            "titles_and_descriptions": "Frugal Grocery Haul - we shop for a family of four",
            "channel_size": "10k-100k",
        },
        "script_generation": {
            "topic": "How to cut your grocery bill in half",
            "audience": "Young families",
            "tone": "Storyteller",
            "platform": "YouTube Short / Reel",
        },
        "script_rewrite": {"text": "Today we are going to talk about saving money.", "tone": "Gen Z"},
        "channel_positioning": {
            "niche": "Frugal living",
            "tone": "Warm and practical",
            "about": "Frugal living and homesteading tips every week.",
            "titles": "Frugal Grocery Haul; Pantry Challenge",
            "sample_comments": "Love this!; Can you do a budget meal plan?",
            "visuals": "Bright thumbnails, yellow text, big faces",
        },
        "position_shift": {
            "current_positioning": "Friendly frugal-living tips for beginners",
            "desired_shift": "More Educational & In-Depth",
        },
        "retention_analysis": {
            "script": "Hook: You are wasting $200 a month. Intro: ...",
            "target_audience": "Beginners",
        },
        "chatbot": {"query": "What does the A/B tester do?", "chat_language": "english"},
    }


# ---------------------------------------------------------------------------
# SAMPLE MODEL OUTPUTS
# ---------------------------------------------------------------------------

AB_OPTION = {
    "ctrPrediction": {"percentage": 6.2},
    "psychologicalTriggers": ["Curiosity", "Urgency"],
    "attentionHeatmap": "iVBORw0KGgo=",
    "audienceFitScore": 82,
    "titleSuggestions": {"shortVersion": "$5 a Day?", "longVersion": "I Lived on $5 a Day for a Week"},
    "formattingImprovements": ["Add a number"],
}


@pytest.fixture
def sample_results() -> Dict[str, Dict[str, Any]]:
    """Valid model outputs keyed by operation name."""
    return {
        "channel_audit": {
            "overall_score": 72,
            "title_analysis": [{
                "title": "Frugal Grocery Haul",
                "strengths": ["Clear topic"],
                "weaknesses": ["No curiosity gap"],
                "suggestion": "I Fed My Family for $50 This Week",
            }],
            "thumbnail_review": [{
                "video_title": "Frugal Grocery Haul",
                "readability_score": 7,
                "emotional_impact": "High curiosity",
                "contrast_feedback": "Text blends into the background",
                "suggestions": ["Use a darker outline"],
            }],
            "niche_focus": "Frugal living with a homesteading angle.",
            "potential_videos": [{
                "title": "Pantry Challenge",
                "reason_for_potential": "Evergreen topic",
                "growth_strategy": "Update title and thumbnail",
            }],
            "content_calendar": [{
                "day": "This Friday",
                "idea": "Cheapest meals of the month",
                "suggested_title": "5 Meals Under $1",
                "thumbnail_concept": "Plate with a price tag",
            }],
        },
        "title_thumbnail": {
            "ctrRating": 6.5,
            "analysis": "Clear promise, weak contrast.",
            "suggestedTitle": "I Lived on $5 a Day for a Week",
            "thumbnailSuggestions": {
                "emotion_use": "Show a surprised face",
                "clutter": "Remove the logo",
                "text_readability": "Use bold sans-serif",
                "color_advice": "Yellow on dark blue",
                "title_match": "Good",
                "ctr_prediction": "Medium",
            },
        },
        "branding_review": {
            "rating": 7.5,
            "strengths": ["Warm tone", "Consistent colors", "Clear niche"],
            "weaknesses": ["Small text", "Generic banner", "No upload schedule"],
            "suggestions": ["Bigger text", "Custom banner", "Add a schedule"],
        },
        "script_rewrite": {
            "shorter": "Let's save money.",
            "more_professional": "Today we will discuss effective saving strategies.",
            "funnier": "Your wallet called. It wants a word.",
        },
        "position_shift": {
            "newTitleTone": "Authoritative and specific",
            "thumbnailStyleSuggestion": "Clean layouts with charts",
            "videoHookExamples": ["Hook one", "Hook two", "Hook three"],
        },
        "retention_analysis": {
            "retentionPredictionScore": 78,
            "performanceSummary": {
                "hookRetention": "Good",
                "midWatchRetention": "Average",
                "finalCtaRetention": "Poor",
            },
            "attentionCurve": {
                "points": [
                    {"timestamp": "0:00", "emotion": "Curiosity", "score": 90},
                    {"timestamp": "0:30", "emotion": "Informative", "score": 70},
                ],
                "summary": "Strong hook, sagging middle.",
            },
            "retentionTimeline": [{
                "timestamp": "0:45-1:05",
                "retentionRisk": "High",
                "dropOffCause": "Poor transition",
                "segmentText": "Intro: ...",
            }],
            "retentionBoostTips": [{
                "timestamp": "0:45",
                "suggestion": "Tease the final number",
                "reason": "Re-opens the curiosity gap",
            }],
            "audiencePersonaMatch": {"matchScore": 80, "feedback": "Simple language suits beginners."},
            "overallSummary": "Tighten the middle section.",
        },
        "ab_test": {
            "winner": "A",
            "overallReasoning": "Option A has a clearer promise.",
            "optionA": dict(AB_OPTION),
            "optionB": dict(AB_OPTION, audienceFitScore=64),
            "viralVideoReferences": [{
                "title": "Living on $1 a Day",
                "stats": "10M views, 8.5% CTR",
                "reasonForRelevance": "Same challenge format",
            }],
        },
        "chatbot": {
            "reply": "The A/B tester compares two title and thumbnail options.",
            "suggestedReplies": ["How do I upload thumbnails?", "Is it free?"],
        },
    }


@pytest.fixture
def as_json() -> Callable[[Dict[str, Any]], str]:
    return json.dumps
