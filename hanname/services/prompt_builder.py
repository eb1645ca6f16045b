"""Prompt Builder - Option translation and chat message assembly.

This module handles:
- Translating the form's option codes into Chinese phrases
- Building the system/user message pair sent to the chat model

Interface Contract:
- translate_*(code) -> str, never raises on unknown codes
- build_messages(profile) -> [system_message, user_message]
"""

from __future__ import annotations

from typing import Iterable

from hanname.models import MAX_TRAITS, NameProfile

GENDER_PHRASES = {
    "male": "男性",
    "female": "女性",
    "neutral": "中性",
}

STYLE_PHRASES = {
    "classic": "古典",
    "modern": "现代",
    "professional": "专业",
    "friendly": "亲切",
}

PHONETIC_PHRASES = {
    "near-original": "尽量贴近英文名读音",
    "native-like": "符合中文母语者习惯",
}

TRAIT_PHRASES = {
    "rational": "理性",
    "gentle": "温和",
    "outgoing": "外向",
    "humorous": "幽默",
    "professional": "专业",
    "artistic": "艺术",
    "athletic": "运动",
    "academic": "学术",
    "leadership": "领导",
    "creative": "创意",
}

UNSPECIFIED = "未指定"
NO_TRAITS = "未提供"
DEFAULT_PHONETIC = "符合中文习惯"
TRAIT_SEPARATOR = "、"

# Button labels shown by the form; only gender and phonetic differ from the prompt phrases
FORM_OPTIONS = {
    "gender": [
        {"value": "male", "label": "男"},
        {"value": "female", "label": "女"},
        {"value": "neutral", "label": "中性"},
    ],
    "traits": [{"value": code, "label": label} for code, label in TRAIT_PHRASES.items()],
    "style": [{"value": code, "label": label} for code, label in STYLE_PHRASES.items()],
    "phonetic": [
        {"value": "near-original", "label": "接近原名"},
        {"value": "native-like", "label": "中文习惯"},
    ],
    "max_traits": MAX_TRAITS,
}

SYSTEM_PROMPT = (
    "你是一位专业的中文起名顾问，为外国用户提供具有文化内涵的中文名字。"
    "你必须只返回符合要求的 JSON 对象，不能包含额外内容。"
)

USER_PROMPT_TEMPLATE = """
请根据以下信息，为用户生成一个贴合个性且寓意积极的中文名字：
- 英文名：{english_name}
- 性别倾向：{gender}
- 自我画像（最多三个）：{traits}
- 名字风格偏好：{style}
- 发音偏好：{phonetic}

请只输出 JSON 对象，不要包含其他任何文本或注释。JSON 结构必须如下：
{{
  "name": "中文名字，两个或三个汉字",
  "pinyin": "名字的标准拼音，带声调数字或音标",
  "meaning": "一句简短说明名字的寓意",
  "reason": "结合用户画像，解释为何推荐这个名字，80 字以内"
}}
""".strip()


def translate_gender(code: str) -> str:
    return GENDER_PHRASES.get(code, UNSPECIFIED)


def translate_style(code: str) -> str:
    return STYLE_PHRASES.get(code, UNSPECIFIED)


def translate_phonetic(code: str) -> str:
    return PHONETIC_PHRASES.get(code, DEFAULT_PHONETIC)


def translate_traits(codes: Iterable[str]) -> str:
    """Join trait phrases; unknown codes pass through unchanged."""
    phrases = [TRAIT_PHRASES.get(code, code) for code in codes]
    if not phrases:
        return NO_TRAITS
    return TRAIT_SEPARATOR.join(phrases)


def build_user_prompt(profile: NameProfile) -> str:
    english_name = profile.english_name.strip()
    if not english_name:
        raise ValueError("English name must be a non-empty string")

    return USER_PROMPT_TEMPLATE.format(
        english_name=english_name,
        gender=translate_gender(profile.gender),
        traits=translate_traits(profile.traits),
        style=translate_style(profile.style),
        phonetic=translate_phonetic(profile.phonetic),
    )


def build_messages(profile: NameProfile) -> list[dict[str, str]]:
    """Build the chat messages for one name request.

    Raises:
        ValueError: If the profile name is empty after trimming
    """
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(profile)},
    ]
