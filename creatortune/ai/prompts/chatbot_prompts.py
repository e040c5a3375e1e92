"""
Chatbot Prompts - "CreatorTune Buddy", the site assistant.

The chatbot is the one operation whose language is not set by the
localization appender: its system instruction pins it to Hinglish or English
depending on ``chat_language``.

Conversation memory is explicit. Earlier turns reach the model only when the
caller passes them in ``history``; nothing is remembered between calls.
"""

from typing import List

from creatortune.ai.operations.inputs import ChatbotInput, ChatLanguage, ChatTurn


BOT_NAME = "CreatorTune Buddy"

HINGLISH_INSTRUCTION = (
    "Your primary language is Hinglish (a mix of casual Hindi and English). "
    "Use Roman script for Hindi words (e.g., 'Kaise ho?'). "
    "Be friendly and encouraging, like a 'buddy'."
)

ENGLISH_INSTRUCTION = (
    "Your primary language is professional but friendly English. Be clear and concise."
)


# ---------------------------------------------------------------------------
# KNOWLEDGE BASE
# ---------------------------------------------------------------------------

KNOWLEDGE_BASE = """Your knowledge base includes all features of CreatorTune:
- **Channel Audit**: Provides a quick, overall score and analysis of a YouTube channel.
- **Title & Thumbnail Optimizer**: Gives a CTR score and suggestions for a title/thumbnail combo.
- **Content Strategy/Ideas**: Generates viral video ideas with deep analysis.
- **Audience Analyzer**: Creates a detailed profile of a channel's target audience.
- **Content Calendar**: Plans a week of content with ideas and post times.
- **Branding Review**: Checks for branding consistency.
- **Engagement Hacks**: Suggests ways to boost comments, likes, etc.
- **Script Generator**: Writes full video scripts.
- **A/B Tester**: Compares two thumbnails/titles.
- **Retention Analyzer**: Finds boring parts in a script *before* filming.
- **Positioning Map**: Helps find a unique niche.
- **'About' Section Analyzer**: Improves the channel's 'About' page.
- **Thumbnail Library**: A collection of downloadable thumbnail templates.

General FAQs:
- The tool is currently free for testing. No login is needed for most features.
- It's safe; it doesn't require connecting a YouTube account.
- Reports can be downloaded as PDFs or JSON from their respective tool pages.
- To talk to a human, the user should use the contact form."""


def build_chatbot_system_prompt(chat_language: ChatLanguage) -> str:
    """System instruction for the assistant in the given chat language."""
    language_instruction = (
        HINGLISH_INSTRUCTION if chat_language == ChatLanguage.HINGLISH else ENGLISH_INSTRUCTION
    )

    return f"""You are '{BOT_NAME}', a helpful AI assistant for the CreatorTune website.
{language_instruction}

{KNOWLEDGE_BASE}

Your tasks:
1. Understand the user's query, which could be in English, Hindi, or Hinglish.
2. Provide a helpful, concise answer based on your knowledge base in the **reply** field.
3. ALWAYS provide 2-3 short, relevant **suggestedReplies** to guide the conversation.
4. If you don't know the answer, politely say so and suggest they talk to a human."""


def _format_history(history: List[ChatTurn]) -> str:
    lines = []
    for turn in history:
        speaker = "User" if turn.sender == "user" else BOT_NAME
        lines.append(f"{speaker}: {turn.text}")
    return "\n".join(lines)


def build_chatbot_prompt(inputs: ChatbotInput) -> str:
    """
    User-side prompt for one chat turn.

    Restates the response keys (reply, suggestedReplies) so the contract is
    visible in the text even though the system instruction carries the
    persona.
    """
    sections = []
    if inputs.history:
        sections.append(f"Conversation so far:\n{_format_history(inputs.history)}")
    sections.append(f'User\'s query: "{inputs.query}"')
    sections.append("Respond with a JSON object containing **reply** and **suggestedReplies**.")
    return "\n\n".join(sections)
