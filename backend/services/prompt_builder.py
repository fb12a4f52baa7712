from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# code -> phrase interpolated into prompts
CHARACTERS: Mapping[str, str] = MappingProxyType(
    {
        "hero": "brave hero",
        "noble": "noble lord or lady",
        "commoner": "humble commoner",
    }
)

LOCATIONS: Mapping[str, str] = MappingProxyType(
    {
        "castle": "mighty castle",
        "forest": "enchanted forest",
        "village": "peaceful village",
    }
)

EVENTS: Mapping[str, str] = MappingProxyType(
    {
        "battle": "epic battle",
        "love": "forbidden love",
        "treachery": "dark treachery",
    }
)

EMOTIONS: Mapping[str, str] = MappingProxyType(
    {
        "joy": "boundless joy",
        "sorrow": "deep sorrow",
        "rage": "righteous rage",
    }
)

FALLBACK_EMOTION = "deep feeling"

DEFAULT_TITLES: Mapping[str, str] = MappingProxyType(
    {
        "english": "Medieval Verse",
        "chinese": "古风诗篇",
    }
)


@dataclass(frozen=True)
class Selection:
    """Validated choices describing the poem to generate."""

    character: str
    location: str
    event: str
    emotion: str
    custom_emotion: str
    language: str


def phrase(table: Mapping[str, str], code: str) -> str:
    """Look up the display phrase for a code; unknown codes pass through unchanged."""
    return table.get(code, code)


def resolve_emotion(selection: Selection) -> str:
    """Custom emotion wins when non-blank, then the preset table, then a generic phrase."""
    custom = (selection.custom_emotion or "").strip()
    if custom:
        return custom
    return EMOTIONS.get(selection.emotion, FALLBACK_EMOTION)


def default_title(language: str) -> str:
    return DEFAULT_TITLES.get(language, DEFAULT_TITLES["english"])


def build_poem_prompt(selection: Selection) -> str:
    """
    Build the poem-generation prompt.
    Chinese selections get a classical quatrain/regulated-verse template,
    everything else the archaic English ballad template.
    """
    character = phrase(CHARACTERS, selection.character)
    location = phrase(LOCATIONS, selection.location)
    event = phrase(EVENTS, selection.event)
    emotion = resolve_emotion(selection)

    if selection.language == "chinese":
        return f"""你是一位中世纪古典中文诗人。请根据以下元素创作一首具有古典韵味的中文诗：

角色：{character}
地点：{location}
事件：{event}
情感：{emotion}

要求：
1. 使用七言绝句或律诗的形式
2. 采用古典中文词汇和表达方式
3. 每句7个字，共4句（绝句）或8句（律诗）
4. 押韵符合古典诗词格律
5. 意境深远，富有画面感
6. 体现中世纪古典韵味
7. 深刻表达"{emotion}"这种情感

请直接输出诗歌内容，不要包含任何解释。"""

    return f"""You are a medieval poet skilled in the art of verse. Create an authentic medieval-style poem based on these elements:

Character: {character}
Location: {location}
Event: {event}
Emotion: {emotion}

Requirements:
1. Write in archaic English with medieval diction (use words like "thy," "thou," "ere," "hath," "doth," etc.)
2. Create 4-line stanzas with cross-rhyme (ABAB or ABCB rhyme scheme)
3. Use iambic meter where possible
4. Include medieval imagery and symbolism
5. Maintain authentic medieval tone and atmosphere
6. Each line should have similar rhythm and meter
7. Generate 3-4 stanzas (12-16 lines total)
8. Deeply express the emotion of "{emotion}" throughout the verse

Example style:
"Upon the castle walls so high,
Where banners dance in morning light,
A hero stands beneath the sky,
His sword prepared for deadly fight."

Please write the complete poem without any explanations or modern commentary."""


def build_title_prompt(selection: Selection, emotion: str) -> str:
    character = phrase(CHARACTERS, selection.character)
    location = phrase(LOCATIONS, selection.location)
    event = phrase(EVENTS, selection.event)

    if selection.language == "chinese":
        return (
            f"为这首关于{character}在{location}经历{event}，"
            f'表达"{emotion}"情感的诗，创作一个4个字的古典标题。只返回标题，不要其他内容。'
        )
    return (
        f"Create a short, poetic medieval title (2-4 words) for a verse about a "
        f"{character} in a {location} experiencing {event} "
        f'with the emotion of "{emotion}". Return only the title.'
    )
