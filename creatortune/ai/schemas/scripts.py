"""
Script Result Schemas - Script generation, segment rewrite and retention analysis.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from creatortune.ai.schemas.gemini_schema import ResultModel
from creatortune.ai.schemas.channel import Level


class ScriptEmotion(str, Enum):
    NEUTRAL = "Neutral"
    HUMOR = "Humor"
    TENSION = "Tension"
    INSPIRATION = "Inspiration"
    EXCITEMENT = "Excitement"
    SADNESS = "Sadness"
    CURIOSITY = "Curiosity"


class PerformanceRating(str, Enum):
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"


class AttentionEmotion(str, Enum):
    EXCITEMENT = "Excitement"
    CURIOSITY = "Curiosity"
    HUMOR = "Humor"
    TENSION = "Tension"
    INFORMATIVE = "Informative"
    NEUTRAL = "Neutral"


# ---------------------------------------------------------------------------
# SCRIPT GENERATION
# ---------------------------------------------------------------------------

class SectionViralTrigger(ResultModel):
    technique: Optional[str] = Field(default=None, description="Name of the technique (e.g., 'Curiosity Gap').")
    reason: Optional[str] = Field(default=None, description="How the technique is applied.")


class ScriptSection(ResultModel):
    section_title: str = Field(description="Title of the section (e.g., 'Hook', 'Main Point 1').")
    emotion: ScriptEmotion = Field(description="The dominant emotion of the section.")
    text: str = Field(description="The script text for this section.")
    pacing_feedback: Optional[str] = Field(default=None, description="Optional pacing or delivery tip.")
    viral_trigger: Optional[SectionViralTrigger] = Field(default=None, description="Optional psychological trigger used here.")


class OptimizedCta(ResultModel):
    style: str = Field(description="CTA style (e.g., 'Direct Question', 'Community Build').")
    placement: str = Field(description="Recommended placement (e.g., 'Last 15 seconds').")
    text: str = Field(description="The full CTA script.")


class AdvancedScriptData(ResultModel):
    script_sections: List[ScriptSection] = Field(description="Script sections, each with a title, text, emotion and optional feedback.")
    optimized_cta: OptimizedCta = Field(description="A compelling call to action for the end of the video.")
    voice_over_annotations: str = Field(description="The whole script as one string with delivery notes like '(pause)'.")


# ---------------------------------------------------------------------------
# SCRIPT SEGMENT REWRITE
# ---------------------------------------------------------------------------

class RewrittenOptions(ResultModel):
    shorter: str = Field(description="A more concise version of the text.")
    more_professional: str = Field(description="A more professional and formal version.")
    funnier: str = Field(description="A wittier, more humorous version.")


# ---------------------------------------------------------------------------
# RETENTION ANALYSIS
# ---------------------------------------------------------------------------

class PerformanceSummary(ResultModel):
    hookRetention: PerformanceRating = Field(description="Rating for the first 15 seconds.")
    midWatchRetention: PerformanceRating = Field(description="Rating for the middle of the video.")
    finalCtaRetention: PerformanceRating = Field(description="Rating for the final 30 seconds.")


class EmotionPoint(ResultModel):
    timestamp: str = Field(description="Timestamp of the point (e.g., '0:00', '0:30').")
    emotion: AttentionEmotion = Field(description="Dominant emotion or state at this point.")
    score: float = Field(description="Attention intensity from 0 to 100.")


class AttentionCurve(ResultModel):
    points: List[EmotionPoint] = Field(description="5-7 evenly spaced points of the attention flow.")
    summary: str = Field(description="The engagement pattern in plain English, with pacing suggestions.")


class TimelineSegment(ResultModel):
    timestamp: str = Field(description="Range of the drop-off zone (e.g., '0:45-1:05').")
    retentionRisk: Level = Field(description="Risk of viewers dropping off.")
    dropOffCause: str = Field(description="Likely cause (e.g., 'Poor transition', 'Unclear message').")
    segmentText: str = Field(description="The script text of this segment.")


class RetentionBoostTip(ResultModel):
    timestamp: str = Field(description="The weak zone this tip applies to.")
    suggestion: str = Field(description="The content change to make.")
    reason: str = Field(description="Why it improves retention.")


class RetentionComparison(ResultModel):
    intro: str = Field(description="Comparison of the intro sections.")
    mid: str = Field(description="Comparison of the mid-sections.")
    end: str = Field(description="Comparison of the endings.")


class CompetitorRetentionAnalysis(ResultModel):
    videoUrl: str
    comparison: RetentionComparison
    structuralSuggestions: List[str] = Field(description="Structure ideas borrowed from the competitor.")


class AudiencePersonaMatch(ResultModel):
    matchScore: float = Field(description="0-100 alignment with the target audience.")
    feedback: str = Field(description="Why the script does or does not fit the persona.")


class RetentionAnalysisData(ResultModel):
    retentionPredictionScore: int = Field(ge=0, le=100, description="Predicted retention score for the whole script, 0 to 100.")
    performanceSummary: PerformanceSummary = Field(description="Ratings for the key segments of the video.")
    attentionCurve: AttentionCurve
    retentionTimeline: List[TimelineSegment] = Field(min_length=1, description="Timeline of potential drop-off zones.")
    retentionBoostTips: List[RetentionBoostTip] = Field(description="Fixes for the 3 weakest retention zones.")
    competitorAnalysis: Optional[List[CompetitorRetentionAnalysis]] = Field(default=None, description="Comparison against competitor videos, only when URLs were given.")
    audiencePersonaMatch: AudiencePersonaMatch = Field(description="How well the script fits the target persona.")
    overallSummary: str = Field(description="A short, actionable summary of the analysis.")
