"""Prompt templates for Gemini speech generation."""

# The TTS model reads the delivery style from the leading instruction
SPEECH_PROMPT = "Say {emotion}: {text}"

PREVIEW_TEXT = "Hello, you can hear my voice now."


def build_speech_prompt(text: str, emotion: str) -> str:
    """Prefix the text with the emotion instruction understood by the model."""
    return SPEECH_PROMPT.format(emotion=emotion, text=text)
