"""
Operation Inputs - Typed, validated inputs for every generation operation.

Each operation accepts one pydantic model. Validation happens here, before
any prompt is built or any network call is made, and every rule carries the
user-facing message the tool pages show (e.g. "Please enter a valid YouTube
channel URL.").

The gateway turns a pydantic failure into an InputError using
``input_error_message`` below.
"""

from enum import Enum
from typing import ClassVar, List, Literal, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from creatortune.ai.multimodal import ImageInput, Slot
from creatortune.ai.schemas.channel import StrategyType


# ---------------------------------------------------------------------------
# INPUT ENUMS
# ---------------------------------------------------------------------------

class ScriptTone(str, Enum):
    PROFESSIONAL = "Professional"
    CASUAL_WITTY = "Casual & Witty"
    GEN_Z = "Gen Z"
    KID_FRIENDLY = "Kid-Friendly"
    STORYTELLER = "Storyteller"


class PlatformFormat(str, Enum):
    LONG_FORM = "YouTube Long-form"
    SHORT = "YouTube Short / Reel"


class AudiencePersona(str, Enum):
    BEGINNERS = "Beginners"
    PROFESSIONALS = "Professionals"
    CREATORS = "Creators"
    GENERAL = "General Audience"
    GEN_Z = "Gen Z"
    MILLENNIALS = "Millennials"


class PositionShiftStyle(str, Enum):
    EDGY = "More Edgy & Controversial"
    EDUCATIONAL = "More Educational & In-Depth"
    ENTERTAINING = "More Entertaining & Humorous"
    POLISHED = "More Polished & Professional"


class ChannelSize(str, Enum):
    STARTING = "0-1k"
    GROWING = "1k-10k"
    ESTABLISHED = "10k-100k"
    LARGE = "100k+"


class ChatLanguage(str, Enum):
    HINGLISH = "hinglish"
    ENGLISH = "english"


ENTER_URL_MESSAGE = "Please enter a YouTube channel URL."
VALID_URL_MESSAGE = "Please enter a valid YouTube channel URL."

YOUTUBE_HOSTS = ("youtube.com", "youtu.be")


# ---------------------------------------------------------------------------
# BASE
# ---------------------------------------------------------------------------

class OperationInput(BaseModel):
    """
    Base class for operation inputs.

    Subclasses list the text fields that must not be blank in
    ``required_text`` and the message shown when one is blank or missing
    in ``missing_message``.
    """
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    required_text: ClassVar[Tuple[str, ...]] = ()
    missing_message: ClassVar[str] = "Please fill in all required fields."

    @model_validator(mode="after")
    def check_required_text(self):
        for name in self.required_text:
            if not getattr(self, name):
                raise ValueError(self.missing_message)
        return self

    def images(self) -> List[Tuple[Slot, ImageInput]]:
        """Images to attach to the request, tagged with their slot."""
        return []


def input_error_message(model: Type[OperationInput], exc: PydanticValidationError) -> str:
    """
    Pick the user-facing message for a failed input validation.

    Messages raised by our own validators are returned as-is. Structural
    problems (missing field, wrong type) fall back to the model's
    ``missing_message``, except for invalid choices which name the field.
    """
    errors = exc.errors()
    if not errors:
        return model.missing_message

    first = errors[0]
    if first["type"] == "value_error" and "error" in first.get("ctx", {}):
        return str(first["ctx"]["error"])
    if first["type"] == "enum":
        field = ".".join(str(part) for part in first["loc"])
        return f"Invalid value for {field}: {first['msg']}"
    return model.missing_message


# ---------------------------------------------------------------------------
# CHANNEL URL TOOLS
# ---------------------------------------------------------------------------

class ChannelUrlInput(OperationInput):
    """Input for the URL-only tools (channel audit, content strategy)."""
    missing_message: ClassVar[str] = ENTER_URL_MESSAGE

    channel_url: str = Field(description="Public YouTube channel URL")

    @field_validator("channel_url")
    @classmethod
    def validate_channel_url(cls, v: str) -> str:
        if not v:
            raise ValueError(ENTER_URL_MESSAGE)
        lowered = v.lower()
        if not any(host in lowered for host in YOUTUBE_HOSTS):
            raise ValueError(VALID_URL_MESSAGE)
        return v


# ---------------------------------------------------------------------------
# IMAGE TOOLS
# ---------------------------------------------------------------------------

class TitleThumbnailInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = ("title",)
    missing_message: ClassVar[str] = "Please provide both a title and a thumbnail image."

    title: str
    thumbnail: ImageInput

    def images(self) -> List[Tuple[Slot, ImageInput]]:
        return [(Slot.THUMBNAIL, self.thumbnail)]


class ABTestInput(OperationInput):
    """Two title/thumbnail options. Option A is always the first image sent."""
    required_text: ClassVar[Tuple[str, ...]] = ("title_a", "title_b", "target_audience")
    missing_message: ClassVar[str] = "Please provide titles, thumbnails, and a target audience for both options."

    title_a: str
    image_a: ImageInput
    title_b: str
    image_b: ImageInput
    target_audience: str

    def images(self) -> List[Tuple[Slot, ImageInput]]:
        return [(Slot.OPTION_A, self.image_a), (Slot.OPTION_B, self.image_b)]


# ---------------------------------------------------------------------------
# CHANNEL DATA TOOLS
# ---------------------------------------------------------------------------

class AudienceProfileInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = ("titles", "descriptions", "about")
    missing_message: ClassVar[str] = "Please fill in all fields with your channel data."

    titles: str = Field(description="Semicolon-separated video titles")
    descriptions: str = Field(description="A few video descriptions separated by '---'")
    about: str


class ContentCalendarInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = ("niche", "top_titles")
    missing_message: ClassVar[str] = "Please fill in both the niche and top titles."

    niche: str
    top_titles: str
    audience_behavior: Optional[str] = None
    strategy_type: StrategyType = StrategyType.GLOBAL


class BrandingReviewInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = (
        "name", "handle", "pfp_description", "banner_description", "about", "titles",
    )
    missing_message: ClassVar[str] = "Please fill in all fields to get a complete branding review."

    name: str
    handle: str
    pfp_description: str
    banner_description: str
    about: str
    titles: str

    @field_validator("handle")
    @classmethod
    def strip_at_sign(cls, v: str) -> str:
        # The prompt adds the @ itself
        return v.lstrip("@")


class AboutSectionInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = ("about_text",)
    missing_message: ClassVar[str] = 'Please paste your "About" section text.'

    about_text: str


class EngagementHacksInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = ("titles_and_descriptions",)
    missing_message: ClassVar[str] = "Please provide some video titles and descriptions."

    titles_and_descriptions: str
    channel_size: ChannelSize = ChannelSize.GROWING


class ChannelPositioningInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = (
        "niche", "tone", "about", "titles", "sample_comments", "visuals",
    )
    missing_message: ClassVar[str] = "Please fill in all fields for a complete positioning report."

    niche: str
    tone: str
    about: str
    titles: str
    sample_comments: str
    visuals: str = Field(description="Description of thumbnails, colors and fonts")


class PositionShiftInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = ("current_positioning",)
    missing_message: ClassVar[str] = "Please describe your current positioning and pick a desired shift."

    current_positioning: str
    desired_shift: PositionShiftStyle


# ---------------------------------------------------------------------------
# SCRIPT TOOLS
# ---------------------------------------------------------------------------

class ScriptGenerationInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = ("topic", "audience")
    missing_message: ClassVar[str] = "Please provide both a video topic and a target audience."

    topic: str
    audience: str
    tone: ScriptTone = ScriptTone.CASUAL_WITTY
    platform: PlatformFormat = PlatformFormat.LONG_FORM


class ScriptRewriteInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = ("text",)
    missing_message: ClassVar[str] = "Please select some text to rewrite."

    text: str
    tone: ScriptTone = ScriptTone.CASUAL_WITTY


class RetentionAnalysisInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = ("script",)
    missing_message: ClassVar[str] = "Please paste your video script to be analyzed."

    script: str
    target_audience: AudiencePersona = AudiencePersona.GENERAL
    competitor_urls: List[str] = Field(default_factory=list)

    @field_validator("competitor_urls")
    @classmethod
    def drop_blank_urls(cls, v: List[str]) -> List[str]:
        return [url.strip() for url in v if url and url.strip()]


# ---------------------------------------------------------------------------
# CHATBOT
# ---------------------------------------------------------------------------

class ChatTurn(BaseModel):
    """One earlier message of the conversation, supplied by the caller."""
    sender: Literal["user", "bot"]
    text: str


class ChatbotInput(OperationInput):
    required_text: ClassVar[Tuple[str, ...]] = ("query",)
    missing_message: ClassVar[str] = "Please type a message first."

    query: str
    chat_language: ChatLanguage = ChatLanguage.ENGLISH
    history: List[ChatTurn] = Field(default_factory=list)
