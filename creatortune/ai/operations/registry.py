"""
Operation Registry - The closed catalog of generation operations.

Each operation is registered exactly once with:
- its input model (validation before anything is built)
- its prompt builder
- its result model, from which the Gemini response schema is derived
- its stable failure message
- how many images it takes, and in which slots

Usage:
======
```python
from creatortune.ai.operations.registry import OperationName, operation_registry

spec = operation_registry.get_operation(OperationName.CHANNEL_AUDIT)
prompt = spec.build_prompt(spec.input_model(channel_url=url), Language.HI)
spec.output_schema["required"]   # ['overall_score', 'title_analysis', ...]
```
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union

from creatortune.ai.localization import Language, append_localization
from creatortune.ai.multimodal import Slot
from creatortune.ai.operations import inputs
from creatortune.ai.operations.inputs import OperationInput
from creatortune.ai import prompts
from creatortune.ai.schemas import (
    ABTestData,
    AboutSectionAnalysisData,
    AdvancedChannelPositioningData,
    AdvancedScriptData,
    AudienceProfileData,
    AuditData,
    BrandingReviewData,
    ChatbotResponse,
    ContentStrategyData,
    EngagementHacksData,
    PersonalizedCalendarData,
    PositionShiftSimulationData,
    ResultModel,
    RetentionAnalysisData,
    RewrittenOptions,
    TitleThumbnailAuditData,
    build_response_schema,
    required_fields,
)


logger = logging.getLogger("creatortune.ai.operations.registry")


# ---------------------------------------------------------------------------
# OPERATION NAMES
# ---------------------------------------------------------------------------

class OperationName(str, Enum):
    """Every operation the gateway knows. Closed: there is no dynamic registration from callers."""
    CHANNEL_AUDIT = "channel_audit"
    TITLE_THUMBNAIL = "title_thumbnail"
    CONTENT_STRATEGY = "content_strategy"
    AUDIENCE_PROFILE = "audience_profile"
    CONTENT_CALENDAR = "content_calendar"
    BRANDING_REVIEW = "branding_review"
    ABOUT_SECTION = "about_section"
    ENGAGEMENT_HACKS = "engagement_hacks"
    SCRIPT_GENERATION = "script_generation"
    SCRIPT_REWRITE = "script_rewrite"
    AB_TEST = "ab_test"
    CHANNEL_POSITIONING = "channel_positioning"
    POSITION_SHIFT = "position_shift"
    RETENTION_ANALYSIS = "retention_analysis"
    CHATBOT = "chatbot"


# ---------------------------------------------------------------------------
# OPERATION SPEC
# ---------------------------------------------------------------------------

@dataclass
class OperationSpec:
    """
    Definition of one generation operation.

    Attributes:
        name: Operation identifier
        description: Human-readable summary (shown by GET /operations)
        input_model: Pydantic model the inputs are validated against
        result_model: Pydantic model the output is decoded into
        prompt_builder: Builds the prompt text from validated inputs
        failure_message: Stable message for transport/validation failures
        image_slots: Slots of the images this operation attaches
        localized: Whether the localization instruction is appended
        preamble: Text placed before labelled images
        system_instruction_builder: Builds an optional system prompt
        output_schema: Gemini response schema, derived from result_model
    """
    name: OperationName
    description: str
    input_model: Type[OperationInput]
    result_model: Type[ResultModel]
    prompt_builder: Callable[[Any], str]
    failure_message: str
    image_slots: Tuple[Slot, ...] = ()
    localized: bool = True
    preamble: Optional[str] = None
    system_instruction_builder: Optional[Callable[[Any], str]] = None
    output_schema: Dict[str, Any] = field(init=False, repr=False)

    def __post_init__(self):
        self.output_schema = build_response_schema(self.result_model)

    @property
    def required_fields(self) -> List[str]:
        return required_fields(self.result_model)

    def build_prompt(self, inputs: OperationInput, language: Union[Language, str] = Language.EN) -> str:
        """
        Build the final prompt text for validated inputs.

        Localized operations get the translation instruction appended for
        any non-default language.
        """
        prompt_text = self.prompt_builder(inputs)
        if self.localized:
            prompt_text = append_localization(prompt_text, language)
        return prompt_text

    def build_system_instruction(self, inputs: OperationInput) -> Optional[str]:
        if self.system_instruction_builder is None:
            return None
        return self.system_instruction_builder(inputs)


# ---------------------------------------------------------------------------
# OPERATION REGISTRY
# ---------------------------------------------------------------------------

class OperationRegistry:
    """
    Registry of all generation operations.

    A singleton that holds the one OperationSpec per OperationName. It is
    written once at import time and only read afterwards.
    """

    def __init__(self):
        self._operations: Dict[OperationName, OperationSpec] = {}
        self._register_builtin_operations()
        logger.info(f"Operation registry initialized with {len(self._operations)} operations")

    def _register_builtin_operations(self):
        """Register all built-in operations."""

        # -----------------------------------------------------------------------
        # CHANNEL URL TOOLS
        # -----------------------------------------------------------------------
        self.register(OperationSpec(
            name=OperationName.CHANNEL_AUDIT,
            description="Multi-level channel audit inferred from the channel URL",
            input_model=inputs.ChannelUrlInput,
            result_model=AuditData,
            prompt_builder=prompts.build_channel_audit_prompt,
            failure_message="Failed to get audit from AI. Please check the channel URL and try again.",
        ))

        self.register(OperationSpec(
            name=OperationName.CONTENT_STRATEGY,
            description="Niche, trends, competitors and viral video ideas for a channel",
            input_model=inputs.ChannelUrlInput,
            result_model=ContentStrategyData,
            prompt_builder=prompts.build_content_strategy_prompt,
            failure_message="Failed to get content strategy from AI. Please check the channel URL and try again.",
        ))

        # -----------------------------------------------------------------------
        # IMAGE TOOLS
        # -----------------------------------------------------------------------
        self.register(OperationSpec(
            name=OperationName.TITLE_THUMBNAIL,
            description="CTR rating and suggestions for a title and its thumbnail",
            input_model=inputs.TitleThumbnailInput,
            result_model=TitleThumbnailAuditData,
            prompt_builder=prompts.build_title_thumbnail_prompt,
            failure_message="Failed to get thumbnail audit from AI. Please check your inputs and try again.",
            image_slots=(Slot.THUMBNAIL,),
        ))

        self.register(OperationSpec(
            name=OperationName.AB_TEST,
            description="Compare two title/thumbnail options and pick a winner",
            input_model=inputs.ABTestInput,
            result_model=ABTestData,
            prompt_builder=prompts.build_ab_test_prompt,
            failure_message="Failed to get A/B test analysis from AI. Please check your inputs and try again.",
            image_slots=(Slot.OPTION_A, Slot.OPTION_B),
            preamble=prompts.AB_TEST_PREAMBLE,
        ))

        # -----------------------------------------------------------------------
        # CHANNEL DATA TOOLS
        # -----------------------------------------------------------------------
        self.register(OperationSpec(
            name=OperationName.AUDIENCE_PROFILE,
            description="Demographic and psychographic profile of a channel's audience",
            input_model=inputs.AudienceProfileInput,
            result_model=AudienceProfileData,
            prompt_builder=prompts.build_audience_profile_prompt,
            failure_message="Failed to get audience analysis from AI. Please check your inputs and try again.",
        ))

        self.register(OperationSpec(
            name=OperationName.CONTENT_CALENDAR,
            description="7-day personalized content calendar",
            input_model=inputs.ContentCalendarInput,
            result_model=PersonalizedCalendarData,
            prompt_builder=prompts.build_content_calendar_prompt,
            failure_message="Failed to generate content calendar. Please check your inputs and try again.",
        ))

        self.register(OperationSpec(
            name=OperationName.BRANDING_REVIEW,
            description="Branding consistency rating with strengths and fixes",
            input_model=inputs.BrandingReviewInput,
            result_model=BrandingReviewData,
            prompt_builder=prompts.build_branding_review_prompt,
            failure_message="Failed to generate branding review. Please check your inputs and try again.",
        ))

        self.register(OperationSpec(
            name=OperationName.ABOUT_SECTION,
            description="Review and rewrite of a channel's About section",
            input_model=inputs.AboutSectionInput,
            result_model=AboutSectionAnalysisData,
            prompt_builder=prompts.build_about_section_prompt,
            failure_message="Failed to get 'About' section analysis from AI. Please check your input and try again.",
        ))

        self.register(OperationSpec(
            name=OperationName.ENGAGEMENT_HACKS,
            description="CTAs, comment triggers and an engagement funnel for a channel",
            input_model=inputs.EngagementHacksInput,
            result_model=EngagementHacksData,
            prompt_builder=prompts.build_engagement_hacks_prompt,
            failure_message="Failed to generate engagement hacks. Please check your inputs and try again.",
        ))

        self.register(OperationSpec(
            name=OperationName.CHANNEL_POSITIONING,
            description="Positioning map, content gaps and a 7-day action plan",
            input_model=inputs.ChannelPositioningInput,
            result_model=AdvancedChannelPositioningData,
            prompt_builder=prompts.build_channel_positioning_prompt,
            failure_message="Failed to generate advanced positioning report. Please check your inputs and try again.",
        ))

        self.register(OperationSpec(
            name=OperationName.POSITION_SHIFT,
            description="Mini-plan for shifting a channel's positioning",
            input_model=inputs.PositionShiftInput,
            result_model=PositionShiftSimulationData,
            prompt_builder=prompts.build_position_shift_prompt,
            failure_message="Failed to generate position shift simulation. Please try again.",
        ))

        # -----------------------------------------------------------------------
        # SCRIPT TOOLS
        # -----------------------------------------------------------------------
        self.register(OperationSpec(
            name=OperationName.SCRIPT_GENERATION,
            description="Sectioned video script with CTA and voice-over notes",
            input_model=inputs.ScriptGenerationInput,
            result_model=AdvancedScriptData,
            prompt_builder=prompts.build_script_generation_prompt,
            failure_message="Failed to generate advanced script. Please check your inputs and try again.",
        ))

        self.register(OperationSpec(
            name=OperationName.SCRIPT_REWRITE,
            description="Three rewrites of a script segment",
            input_model=inputs.ScriptRewriteInput,
            result_model=RewrittenOptions,
            prompt_builder=prompts.build_script_rewrite_prompt,
            failure_message="Failed to rewrite text. Please try again.",
        ))

        self.register(OperationSpec(
            name=OperationName.RETENTION_ANALYSIS,
            description="Drop-off prediction and retention fixes for a script",
            input_model=inputs.RetentionAnalysisInput,
            result_model=RetentionAnalysisData,
            prompt_builder=prompts.build_retention_analysis_prompt,
            failure_message="Failed to generate retention analysis. Please check your script and try again.",
        ))

        # -----------------------------------------------------------------------
        # CHATBOT
        # -----------------------------------------------------------------------
        self.register(OperationSpec(
            name=OperationName.CHATBOT,
            description="Site assistant answering questions about the tools",
            input_model=inputs.ChatbotInput,
            result_model=ChatbotResponse,
            prompt_builder=prompts.build_chatbot_prompt,
            failure_message="Sorry, I'm having a little trouble thinking right now. Please try again in a moment.",
            localized=False,
            system_instruction_builder=lambda chat: prompts.build_chatbot_system_prompt(chat.chat_language),
        ))

    def register(self, operation: OperationSpec) -> None:
        """
        Register an operation.

        Raises:
            ValueError: The name is already registered, or the result
                schema has no required top-level fields
        """
        if operation.name in self._operations:
            raise ValueError(f"Operation already registered: {operation.name.value}")
        if not operation.output_schema.get("required"):
            raise ValueError(
                f"Operation {operation.name.value} must declare at least one required result field"
            )
        self._operations[operation.name] = operation
        logger.debug(f"Registered operation: {operation.name.value}")

    def get_operation(self, name: Union[OperationName, str]) -> Optional[OperationSpec]:
        """
        Get an operation by name.

        Args:
            name: OperationName or its string value

        Returns:
            OperationSpec if found, None otherwise
        """
        try:
            return self._operations.get(OperationName(name))
        except ValueError:
            return None

    def has_operation(self, name: Union[OperationName, str]) -> bool:
        return self.get_operation(name) is not None

    def list_operations(self) -> List[OperationSpec]:
        """All registered operations, in registration order."""
        return list(self._operations.values())


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------

operation_registry = OperationRegistry()
