"""
Localization Appender - Ask the model to answer in the user's language.

The gateway never translates anything itself. When the requested language is
not the default, a fixed instruction is appended to the prompt asking Gemini
to translate string values in its JSON answer while leaving keys and
enumerated values alone (the UI switches on those).
"""

from enum import Enum
from typing import Optional, Union

from creatortune.core.config import settings


class Language(str, Enum):
    """Languages the product UI offers."""
    EN = "en"
    HI = "hi"
    ES = "es"
    FR = "fr"


LANGUAGE_NAMES = {
    Language.EN: "English",
    Language.HI: "हिन्दी",
    Language.ES: "Español",
    Language.FR: "Français",
}

LOCALIZATION_INSTRUCTION = (
    "\n\nIMPORTANT: After generating the entire JSON response, translate all string "
    "values within the JSON object to {language_name}. Do not translate the JSON keys "
    "or enum values. Preserve all original formatting and structure."
)


def get_language_name(language: Union[Language, str]) -> str:
    """Display name for a language code, falling back to English."""
    try:
        return LANGUAGE_NAMES[Language(language)]
    except ValueError:
        return LANGUAGE_NAMES[Language.EN]


def get_localization_instruction(language: Union[Language, str]) -> str:
    """The suffix for a language, with its name substituted."""
    return LOCALIZATION_INSTRUCTION.format(language_name=get_language_name(language))


def append_localization(
    prompt_text: str,
    language: Union[Language, str],
    default_language: Optional[str] = None,
) -> str:
    """
    Append the localization instruction unless the language is the default.

    Args:
        prompt_text: The operation's prompt
        language: Target language for string values in the result
        default_language: Override for settings.DEFAULT_LANGUAGE

    Returns:
        prompt_text unchanged for the default language, otherwise
        prompt_text followed by the instruction
    """
    default = default_language or settings.DEFAULT_LANGUAGE
    code = language.value if isinstance(language, Language) else str(language)
    if code == default:
        return prompt_text
    return prompt_text + get_localization_instruction(language)
