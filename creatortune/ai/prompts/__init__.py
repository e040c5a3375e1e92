"""
Prompts Module - Prompt builders for every generation operation.

Each builder takes the operation's validated input model and returns the
prompt text. Localization is appended afterwards by the registry, never by
the builders themselves.
"""

from creatortune.ai.prompts.channel_prompts import (
    build_channel_audit_prompt,
    build_content_strategy_prompt,
    build_audience_profile_prompt,
    build_content_calendar_prompt,
    build_branding_review_prompt,
    build_about_section_prompt,
    build_engagement_hacks_prompt,
    build_channel_positioning_prompt,
    build_position_shift_prompt,
)
from creatortune.ai.prompts.script_prompts import (
    build_script_generation_prompt,
    build_script_rewrite_prompt,
    build_retention_analysis_prompt,
)
from creatortune.ai.prompts.visual_prompts import (
    AB_TEST_PREAMBLE,
    build_title_thumbnail_prompt,
    build_ab_test_prompt,
)
from creatortune.ai.prompts.chatbot_prompts import (
    build_chatbot_prompt,
    build_chatbot_system_prompt,
)

__all__ = [
    "build_channel_audit_prompt",
    "build_content_strategy_prompt",
    "build_audience_profile_prompt",
    "build_content_calendar_prompt",
    "build_branding_review_prompt",
    "build_about_section_prompt",
    "build_engagement_hacks_prompt",
    "build_channel_positioning_prompt",
    "build_position_shift_prompt",
    "build_script_generation_prompt",
    "build_script_rewrite_prompt",
    "build_retention_analysis_prompt",
    "AB_TEST_PREAMBLE",
    "build_title_thumbnail_prompt",
    "build_ab_test_prompt",
    "build_chatbot_prompt",
    "build_chatbot_system_prompt",
]
