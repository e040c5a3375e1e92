"""
Tests for the multimodal request builder.

This module tests:
- Data URL stripping
- Image validation (size ceiling, mime types, undecodable payloads)
- Slot ordering and labels for two-image requests
- Conversion to google-genai parts
"""

from dataclasses import FrozenInstanceError

import pytest

from creatortune.ai.errors import ErrorKind, InputError
from creatortune.ai.multimodal import (
    IMAGE_TOO_LARGE_MESSAGE,
    IMAGE_TYPE_MESSAGE,
    ImageInput,
    RequestEnvelope,
    Slot,
    attach_images,
    load_image,
    strip_data_url,
)


FOUR_MIB = 4 * 1024 * 1024


# ===========================================================================
# DATA URLS
# ===========================================================================

class TestStripDataUrl:
    """Tests for strip_data_url()."""

    def test_strips_prefix(self):
        assert strip_data_url("data:image/png;base64,QUJD") == "QUJD"

    def test_bare_payload_is_returned_unchanged(self):
        assert strip_data_url("QUJD") == "QUJD"

    def test_prefix_without_comma_is_rejected(self):
        with pytest.raises(InputError):
            strip_data_url("data:image/png;base64")

    def test_non_base64_data_url_is_rejected(self):
        with pytest.raises(InputError):
            strip_data_url("data:image/png,rawbytes")


# ===========================================================================
# IMAGE VALIDATION
# ===========================================================================

class TestLoadImage:
    """Tests for load_image()."""

    def test_exactly_four_mib_is_accepted(self, data_url):
        image = ImageInput(data_url=data_url(FOUR_MIB), mime_type="image/png")

        part = load_image(image, Slot.THUMBNAIL)

        assert len(part.data) == FOUR_MIB

    def test_one_byte_over_is_rejected(self, data_url):
        image = ImageInput(data_url=data_url(FOUR_MIB + 1), mime_type="image/png")

        with pytest.raises(InputError) as exc_info:
            load_image(image, Slot.THUMBNAIL)

        assert exc_info.value.kind == ErrorKind.INPUT
        assert exc_info.value.message == IMAGE_TOO_LARGE_MESSAGE

    @pytest.mark.parametrize("mime_type", ["image/png", "image/jpeg", "image/webp", "IMAGE/PNG"])
    def test_accepted_mime_types(self, data_url, mime_type):
        image = ImageInput(data_url=data_url(16), mime_type=mime_type)

        part = load_image(image, Slot.THUMBNAIL)

        assert part.mime_type == mime_type.lower()

    @pytest.mark.parametrize("mime_type", ["image/gif", "application/pdf", ""])
    def test_other_mime_types_are_rejected(self, data_url, mime_type):
        image = ImageInput(data_url=data_url(16), mime_type=mime_type)

        with pytest.raises(InputError) as exc_info:
            load_image(image, Slot.THUMBNAIL)

        assert exc_info.value.message == IMAGE_TYPE_MESSAGE

    def test_undecodable_payload_is_rejected(self):
        image = ImageInput(data_url="data:image/png;base64,not base64!!", mime_type="image/png")

        with pytest.raises(InputError):
            load_image(image, Slot.THUMBNAIL)

    def test_empty_payload_is_rejected(self):
        image = ImageInput(data_url="data:image/png;base64,", mime_type="image/png")

        with pytest.raises(InputError):
            load_image(image, Slot.THUMBNAIL)

    def test_payload_is_decoded_to_bytes(self, data_url):
        image = ImageInput(data_url=data_url(10, fill=b"Z"), mime_type="image/png")

        part = load_image(image, Slot.THUMBNAIL)

        assert part.data == b"Z" * 10
        assert part.to_part().inline_data.data == b"Z" * 10


# ===========================================================================
# ENVELOPE ORDERING
# ===========================================================================

class TestAttachImages:
    """Tests for attach_images() and RequestEnvelope ordering."""

    def test_no_images_sends_prompt_only(self):
        envelope = attach_images("Rewrite this.")

        assert envelope.ordered_segments() == ["Rewrite this."]
        assert envelope.image_parts == ()

    def test_single_image_follows_prompt(self, data_url):
        image = ImageInput(data_url=data_url(8), mime_type="image/png")

        envelope = attach_images("Rate this thumbnail.", [(Slot.THUMBNAIL, image)])
        segments = envelope.ordered_segments()

        assert segments[0] == "Rate this thumbnail."
        assert segments[1].slot == Slot.THUMBNAIL
        assert len(segments) == 2

    def test_two_images_are_labelled_in_slot_order(self, data_url):
        image_a = ImageInput(data_url=data_url(8, fill=b"A"), mime_type="image/png")
        image_b = ImageInput(data_url=data_url(8, fill=b"B"), mime_type="image/jpeg")

        envelope = attach_images(
            "Compare them.",
            [(Slot.OPTION_A, image_a), (Slot.OPTION_B, image_b)],
            preamble="Analyze this A/B Test.",
        )
        segments = envelope.ordered_segments()

        assert segments[0] == "Analyze this A/B Test."
        assert segments[1] == "Option A:"
        assert segments[2].data == b"A" * 8
        assert segments[3] == "Option B:"
        assert segments[4].data == b"B" * 8
        assert segments[5] == "Compare them."

    def test_swapped_input_order_is_normalized(self, data_url):
        """Option A is always sent first, whatever order the caller lists them in."""
        image_a = ImageInput(data_url=data_url(8, fill=b"A"), mime_type="image/png")
        image_b = ImageInput(data_url=data_url(8, fill=b"B"), mime_type="image/png")

        envelope = attach_images("Compare.", [(Slot.OPTION_B, image_b), (Slot.OPTION_A, image_a)])

        assert [part.slot for part in envelope.image_parts] == [Slot.OPTION_A, Slot.OPTION_B]
        assert envelope.image_parts[0].data == b"A" * 8

    def test_duplicate_slot_is_rejected(self, data_url):
        image = ImageInput(data_url=data_url(8), mime_type="image/png")

        with pytest.raises(InputError):
            attach_images("Compare.", [(Slot.OPTION_A, image), (Slot.OPTION_A, image)])

    def test_oversized_second_image_rejects_whole_request(self, data_url):
        small = ImageInput(data_url=data_url(8), mime_type="image/png")
        large = ImageInput(data_url=data_url(FOUR_MIB + 1), mime_type="image/png")

        with pytest.raises(InputError) as exc_info:
            attach_images("Compare.", [(Slot.OPTION_A, small), (Slot.OPTION_B, large)])

        assert exc_info.value.message == IMAGE_TOO_LARGE_MESSAGE

    def test_envelope_carries_schema_and_system_instruction(self):
        schema = {"type": "OBJECT", "properties": {}, "required": ["reply"]}

        envelope = attach_images("Hi", schema=schema, system_instruction="You are a buddy.")

        assert envelope.schema == schema
        assert envelope.system_instruction == "You are a buddy."

    def test_to_contents_builds_text_and_inline_parts(self, data_url):
        image = ImageInput(data_url=data_url(8, fill=b"Q"), mime_type="image/webp")
        envelope = attach_images("Rate this.", [(Slot.THUMBNAIL, image)])

        contents = envelope.to_contents()

        assert contents[0].text == "Rate this."
        assert contents[1].inline_data.data == b"Q" * 8
        assert contents[1].inline_data.mime_type == "image/webp"

    def test_envelope_is_immutable(self):
        envelope = RequestEnvelope(prompt_text="x")

        with pytest.raises(FrozenInstanceError):
            envelope.prompt_text = "y"
