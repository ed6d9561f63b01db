"""Closed sets of voices, emotions and languages offered to the UI."""

from enum import Enum
from typing import Any, Dict, List


class Voice(str, Enum):
    # Adult voices
    ADULT_FEMALE_FORMAL = "Kore"
    ADULT_MALE_FORMAL = "Puck"
    ADULT_FEMALE_FRIENDLY = "Zephyr"
    ADULT_MALE_FRIENDLY = "Charon"
    NEUTRAL = "Zephyr_neutral"

    # Character voices
    DEEP = "Fenrir"
    WHISPER = "Zephyr_whisper"

    @property
    def base_name(self) -> str:
        """Prebuilt voice name understood by the API, e.g. Zephyr_whisper -> Zephyr."""
        return self.value.split("_")[0]


class Emotion(str, Enum):
    CALM = "calmly"
    HAPPY = "cheerfully"
    SAD = "sadly"
    SERIOUS = "seriously"


class Language(str, Enum):
    ENGLISH = "en"
    SPANISH = "es"
    HINDI = "hi"
    ARABIC = "ar"
    URDU = "ur"
    PERSIAN = "fa"
    FRENCH = "fr"
    GERMAN = "de"
    JAPANESE = "ja"
    KOREAN = "ko"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    CHINESE = "zh"

    @property
    def label(self) -> str:
        return self.name.title()


DEFAULT_VOICE = Voice.ADULT_FEMALE_FORMAL
DEFAULT_EMOTION = Emotion.CALM

VOICE_LABELS: Dict[Voice, str] = {
    Voice.ADULT_FEMALE_FORMAL: "Female (Formal)",
    Voice.ADULT_MALE_FORMAL: "Male (Formal)",
    Voice.ADULT_FEMALE_FRIENDLY: "Female (Friendly)",
    Voice.ADULT_MALE_FRIENDLY: "Male (Friendly)",
    Voice.NEUTRAL: "Neutral",
    Voice.DEEP: "Deep",
    Voice.WHISPER: "Whisper",
}

VOICE_GROUPS: Dict[str, List[Voice]] = {
    "Standard Voices": [
        Voice.ADULT_FEMALE_FORMAL,
        Voice.ADULT_MALE_FORMAL,
        Voice.ADULT_FEMALE_FRIENDLY,
        Voice.ADULT_MALE_FRIENDLY,
        Voice.NEUTRAL,
    ],
    "Character Voices": [Voice.DEEP, Voice.WHISPER],
}

EMOTION_LABELS: Dict[Emotion, str] = {
    Emotion.CALM: "Calm",
    Emotion.HAPPY: "Happy",
    Emotion.SAD: "Sad",
    Emotion.SERIOUS: "Serious",
}


def language_options() -> List[Dict[str, str]]:
    return [{"value": language.value, "label": language.label} for language in Language]


def voice_options() -> List[Dict[str, Any]]:
    """Voice options grouped the way the select widget renders them."""
    return [
        {
            "label": group,
            "options": [{"value": voice.value, "label": VOICE_LABELS[voice]} for voice in voices],
        }
        for group, voices in VOICE_GROUPS.items()
    ]


def emotion_options() -> List[Dict[str, str]]:
    return [{"value": emotion.value, "label": EMOTION_LABELS[emotion]} for emotion in Emotion]
