"""
Visual Result Schemas - Results of the image-based tools.

Both tools receive thumbnails as inline attachments. In the A/B test, the
optionA/optionB slots map to the images by position in the request (see
creatortune.ai.multimodal), never by anything in the image itself.
"""

from enum import Enum
from typing import List

from pydantic import Field

from creatortune.ai.schemas.gemini_schema import ResultModel
from creatortune.ai.schemas.channel import Level


class ABWinner(str, Enum):
    A = "A"
    B = "B"
    NEITHER = "Neither"


# ---------------------------------------------------------------------------
# TITLE & THUMBNAIL
# ---------------------------------------------------------------------------

class AdvancedThumbnailSuggestions(ResultModel):
    emotion_use: str = Field(description="How the thumbnail uses emotion (e.g., facial expressions) and how to improve it.")
    clutter: str = Field(description="Visual clutter feedback with advice to simplify.")
    text_readability: str = Field(description="Font type, size and placement for mobile readability.")
    color_advice: str = Field(description="High-converting color combinations for the topic.")
    title_match: str = Field(description="How well the thumbnail represents the title.")
    ctr_prediction: Level = Field(description="Predicted click-through rate category.")


class TitleThumbnailAuditData(ResultModel):
    ctrRating: float = Field(description="Click-through rate score from 1 to 10.")
    analysis: str = Field(description="A detailed analysis of the title and thumbnail.")
    suggestedTitle: str = Field(description="An improved, more clickable title.")
    thumbnailSuggestions: AdvancedThumbnailSuggestions = Field(description="In-depth suggestions for improving the thumbnail.")


# ---------------------------------------------------------------------------
# A/B TEST
# ---------------------------------------------------------------------------

class CtrPrediction(ResultModel):
    percentage: float = Field(description="Predicted click-through rate in percent (4.5 means 4.5%).")


class TitleVariants(ResultModel):
    shortVersion: str = Field(description="A shorter, punchier title.")
    longVersion: str = Field(description="A longer, more descriptive title.")


class ABTestOption(ResultModel):
    ctrPrediction: CtrPrediction
    psychologicalTriggers: List[str] = Field(description="Triggers used (e.g., 'Curiosity', 'Urgency', 'Social Proof').")
    attentionHeatmap: str = Field(description="Base64 PNG: a transparent overlay the size of the thumbnail, red for high attention, yellow for medium.")
    audienceFitScore: float = Field(description="0-100 fit with the target audience.")
    titleSuggestions: TitleVariants
    formattingImprovements: List[str] = Field(description="Title format improvements (e.g., 'Add a number').")


class ViralVideoReference(ResultModel):
    title: str = Field(description="Title of a similar viral video.")
    stats: str = Field(description="Its performance (e.g., '10M views, 8.5% CTR').")
    reasonForRelevance: str = Field(description="Why it is a good reference.")


class ABTestData(ResultModel):
    winner: ABWinner = Field(description="Which option should get the higher CTR: 'A', 'B' or 'Neither'.")
    overallReasoning: str = Field(description="Why, summarizing the key differences.")
    optionA: ABTestOption = Field(description="Analysis of the first attached image and title.")
    optionB: ABTestOption = Field(description="Analysis of the second attached image and title.")
    viralVideoReferences: List[ViralVideoReference] = Field(description="2-3 similar viral videos for reference.")
