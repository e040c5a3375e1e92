"""
Multimodal Request Builder - Package prompt text and inline images.

Images arrive from the upload forms as data URLs
(``data:image/png;base64,iVBOR...``) plus a separately tracked mime type.
This module validates them, strips the data-URL prefix, and builds the
RequestEnvelope the Gemini provider sends.

Ordering:
=========
Gemini has no structural way to tell "first image" from "second image"
other than position in the content list. Every image therefore carries a
Slot, and labelled slots are always emitted in slot order with their label
in front of them:

    [preamble] "Option A:" <image A> "Option B:" <image B> <prompt>

Single-image operations send the prompt first and the image after it.
"""

import base64
import binascii
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from google.genai import types
from pydantic import BaseModel, Field

from creatortune.ai.errors import InputError
from creatortune.core.config import settings

logger = logging.getLogger("creatortune.ai.multimodal")


# ---------------------------------------------------------------------------
# SLOTS
# ---------------------------------------------------------------------------

class Slot(str, Enum):
    """Which domain concept an attached image stands for."""
    THUMBNAIL = "thumbnail"
    OPTION_A = "option_a"
    OPTION_B = "option_b"


# Labelled slots, in the order they must appear in the request
SLOT_LABELS: Dict[Slot, str] = {
    Slot.OPTION_A: "Option A:",
    Slot.OPTION_B: "Option B:",
}
SLOT_ORDER: Dict[Slot, int] = {Slot.THUMBNAIL: 0, Slot.OPTION_A: 1, Slot.OPTION_B: 2}

IMAGE_TOO_LARGE_MESSAGE = "Image size should not exceed 4MB."
IMAGE_TYPE_MESSAGE = "Please upload a PNG, JPEG or WEBP image."
IMAGE_UNREADABLE_MESSAGE = "The uploaded image could not be read. Please try another file."


# ---------------------------------------------------------------------------
# INPUT / OUTPUT TYPES
# ---------------------------------------------------------------------------

class ImageInput(BaseModel):
    """An uploaded image as the UI hands it over."""
    data_url: str = Field(description="data:<mime>;base64,<payload> string (a bare base64 payload is accepted too)")
    mime_type: str = Field(description="Mime type tracked by the upload form")


@dataclass(frozen=True)
class ImagePart:
    """A validated inline attachment."""
    slot: Slot
    mime_type: str
    data: bytes

    def to_part(self) -> types.Part:
        return types.Part.from_bytes(data=self.data, mime_type=self.mime_type)


@dataclass(frozen=True)
class RequestEnvelope:
    """
    Everything one generation call sends. Built per call, never shared.

    Attributes:
        prompt_text: The operation prompt, localization already appended
        image_parts: Validated attachments, in slot order
        schema: Gemini response schema the output must follow
        system_instruction: Optional system prompt (chatbot)
        preamble: Optional text placed before labelled images
    """
    prompt_text: str
    image_parts: Tuple[ImagePart, ...] = ()
    schema: Dict[str, Any] = field(default_factory=dict)
    system_instruction: Optional[str] = None
    preamble: Optional[str] = None

    def ordered_segments(self) -> List[Union[str, ImagePart]]:
        """Text and image segments in the exact order they are sent."""
        if not self.image_parts:
            return [self.prompt_text]

        if not any(part.slot in SLOT_LABELS for part in self.image_parts):
            return [self.prompt_text, *self.image_parts]

        segments: List[Union[str, ImagePart]] = []
        if self.preamble:
            segments.append(self.preamble)
        for part in self.image_parts:
            label = SLOT_LABELS.get(part.slot)
            if label:
                segments.append(label)
            segments.append(part)
        segments.append(self.prompt_text)
        return segments

    def to_contents(self) -> List[types.Part]:
        """Convert to google-genai parts."""
        contents = []
        for segment in self.ordered_segments():
            if isinstance(segment, ImagePart):
                contents.append(segment.to_part())
            else:
                contents.append(types.Part.from_text(text=segment))
        return contents


# ---------------------------------------------------------------------------
# VALIDATION
# ---------------------------------------------------------------------------

def strip_data_url(data_url: str) -> str:
    """Return the raw base64 payload of a data URL."""
    value = data_url.strip()
    if value.startswith("data:"):
        header, sep, payload = value.partition(",")
        if not sep or ";base64" not in header:
            raise InputError(IMAGE_UNREADABLE_MESSAGE)
        return payload
    return value


def load_image(image: ImageInput, slot: Slot) -> ImagePart:
    """
    Validate one uploaded image and turn it into an ImagePart.

    Raises:
        InputError: Unsupported mime type, undecodable payload, or more
            than settings.MAX_IMAGE_BYTES of decoded data
    """
    mime_type = image.mime_type.strip().lower()
    if mime_type not in settings.ACCEPTED_IMAGE_MIME_TYPES:
        raise InputError(IMAGE_TYPE_MESSAGE)

    payload = strip_data_url(image.data_url)
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.warning(f"Rejected undecodable image for slot {slot.value}: {e}")
        raise InputError(IMAGE_UNREADABLE_MESSAGE) from e

    if not data:
        raise InputError(IMAGE_UNREADABLE_MESSAGE)
    if len(data) > settings.MAX_IMAGE_BYTES:
        raise InputError(IMAGE_TOO_LARGE_MESSAGE)

    return ImagePart(slot=slot, mime_type=mime_type, data=data)


# ---------------------------------------------------------------------------
# BUILDER
# ---------------------------------------------------------------------------

def attach_images(
    prompt_text: str,
    images: Sequence[Tuple[Slot, ImageInput]] = (),
    *,
    schema: Optional[Dict[str, Any]] = None,
    preamble: Optional[str] = None,
    system_instruction: Optional[str] = None,
) -> RequestEnvelope:
    """
    Build the RequestEnvelope for one call.

    Every image is validated before anything is built, so an oversized
    second image rejects the whole request.

    Args:
        prompt_text: Final prompt text
        images: (slot, image) pairs; emitted in slot order
        schema: Response schema for the call
        preamble: Text placed before labelled images
        system_instruction: Optional system prompt

    Returns:
        A new RequestEnvelope
    """
    slots = [slot for slot, _ in images]
    if len(set(slots)) != len(slots):
        raise InputError("Each image slot can only be used once.")

    parts = [load_image(image, slot) for slot, image in images]
    parts.sort(key=lambda part: SLOT_ORDER[part.slot])

    return RequestEnvelope(
        prompt_text=prompt_text,
        image_parts=tuple(parts),
        schema=schema or {},
        system_instruction=system_instruction,
        preamble=preamble,
    )
