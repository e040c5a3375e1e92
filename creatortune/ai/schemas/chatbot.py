"""Chatbot Result Schema."""

from typing import List

from pydantic import Field

from creatortune.ai.schemas.gemini_schema import ResultModel


class ChatbotResponse(ResultModel):
    reply: str = Field(description="The assistant's helpful, friendly answer.")
    suggestedReplies: List[str] = Field(description="2-3 short follow-up questions or actions.")
