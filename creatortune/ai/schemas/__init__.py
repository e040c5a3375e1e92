"""AI Schemas package - Result models for every generation operation."""

from creatortune.ai.schemas.gemini_schema import (
    ResultModel,
    SchemaDefinitionError,
    build_response_schema,
    required_fields,
)
from creatortune.ai.schemas.channel import (
    AuditData,
    ContentStrategyData,
    AudienceProfileData,
    PersonalizedCalendarData,
    BrandingReviewData,
    AboutSectionAnalysisData,
    EngagementHacksData,
    AdvancedChannelPositioningData,
    PositionShiftSimulationData,
    Level,
    StrategyType,
)
from creatortune.ai.schemas.scripts import (
    AdvancedScriptData,
    RewrittenOptions,
    RetentionAnalysisData,
)
from creatortune.ai.schemas.visuals import (
    TitleThumbnailAuditData,
    ABTestData,
    ABWinner,
)
from creatortune.ai.schemas.chatbot import ChatbotResponse

__all__ = [
    "ResultModel",
    "SchemaDefinitionError",
    "build_response_schema",
    "required_fields",
    "AuditData",
    "ContentStrategyData",
    "AudienceProfileData",
    "PersonalizedCalendarData",
    "BrandingReviewData",
    "AboutSectionAnalysisData",
    "EngagementHacksData",
    "AdvancedChannelPositioningData",
    "PositionShiftSimulationData",
    "Level",
    "StrategyType",
    "AdvancedScriptData",
    "RewrittenOptions",
    "RetentionAnalysisData",
    "TitleThumbnailAuditData",
    "ABTestData",
    "ABWinner",
    "ChatbotResponse",
]
