"""选项翻译与 Prompt 构建单元测试。"""

import re

import pytest

from hanname.models import NameProfile
from hanname.services.prompt_builder import (
    FORM_OPTIONS,
    GENDER_PHRASES,
    PHONETIC_PHRASES,
    STYLE_PHRASES,
    SYSTEM_PROMPT,
    TRAIT_PHRASES,
    build_messages,
    translate_gender,
    translate_phonetic,
    translate_style,
    translate_traits,
)

ALL_CODES = set(GENDER_PHRASES) | set(STYLE_PHRASES) | set(PHONETIC_PHRASES) | set(TRAIT_PHRASES)


class TestOptionTranslator:
    """测试选项翻译。"""

    def test_known_codes(self):
        """测试已知代码翻译为中文短语。"""
        assert translate_gender("female") == "女性"
        assert translate_style("classic") == "古典"
        assert translate_phonetic("near-original") == "尽量贴近英文名读音"

    def test_unknown_gender_falls_back(self):
        """测试未知性别使用默认短语。"""
        assert translate_gender("robot") == "未指定"
        assert translate_gender("") == "未指定"

    def test_unknown_style_falls_back(self):
        """测试未知风格使用默认短语。"""
        assert translate_style("baroque") == "未指定"

    def test_unknown_phonetic_falls_back(self):
        """测试未知发音偏好使用默认短语。"""
        assert translate_phonetic("whatever") == "符合中文习惯"

    def test_traits_joined_in_order(self):
        """测试特质按顺序用顿号连接。"""
        assert translate_traits(["gentle", "creative"]) == "温和、创意"

    def test_unknown_trait_passes_through(self):
        """测试未知特质原样保留。"""
        assert translate_traits(["gentle", "curious"]) == "温和、curious"

    def test_empty_traits(self):
        """测试空特质列表返回“未提供”。"""
        assert translate_traits([]) == "未提供"
        assert translate_traits(()) == "未提供"


class TestBuildMessages:
    """测试 build_messages。"""

    def test_returns_system_and_user(self, sample_profile):
        """测试返回 system 和 user 两条消息。"""
        messages = build_messages(sample_profile)

        assert [m["role"] for m in messages] == ["system", "user"]
        assert messages[0]["content"] == SYSTEM_PROMPT
        assert "JSON" in messages[0]["content"]

    def test_prompt_includes_name_and_phrases(self, sample_profile):
        """测试 prompt 包含英文名和翻译后的短语。"""
        prompt = build_messages(sample_profile)[1]["content"]

        assert "Emma" in prompt
        assert "女性" in prompt
        assert "温和、创意" in prompt
        assert "现代" in prompt
        assert "符合中文母语者习惯" in prompt

    def test_prompt_requests_four_field_schema(self, sample_profile):
        """测试 prompt 要求四个 JSON 字段。"""
        prompt = build_messages(sample_profile)[1]["content"]

        for key in ("name", "pinyin", "meaning", "reason"):
            assert f'"{key}"' in prompt

    @pytest.mark.parametrize("gender", sorted(GENDER_PHRASES))
    @pytest.mark.parametrize("style", sorted(STYLE_PHRASES))
    @pytest.mark.parametrize("phonetic", sorted(PHONETIC_PHRASES))
    def test_prompt_never_contains_raw_codes(self, gender, style, phonetic):
        """测试 prompt 不包含原始选项代码。"""
        profile = NameProfile(
            english_name="Oliver",
            gender=gender,
            traits=("rational", "leadership", "professional"),
            style=style,
            phonetic=phonetic,
        )

        prompt = build_messages(profile)[1]["content"]

        assert "Oliver" in prompt
        words = set(re.findall(r"[A-Za-z-]+", prompt))
        assert not words & ALL_CODES

    def test_prompt_with_minimal_profile(self, minimal_profile):
        """测试最小化 Profile 也能构建 prompt。"""
        prompt = build_messages(minimal_profile)[1]["content"]

        assert "Jo" in prompt
        assert "未提供" in prompt

    def test_name_with_braces_is_kept_literally(self):
        """测试英文名中的花括号原样写入。"""
        prompt = build_messages(NameProfile(english_name="{Ann}"))[1]["content"]

        assert "{Ann}" in prompt

    def test_empty_name_raises(self):
        """测试空英文名抛出 ValueError。"""
        with pytest.raises(ValueError):
            build_messages(NameProfile(english_name="   "))


class TestFormOptions:
    """测试表单选项目录。"""

    def test_catalog_sizes(self):
        """测试各选项数量。"""
        assert len(FORM_OPTIONS["gender"]) == 3
        assert len(FORM_OPTIONS["traits"]) == 10
        assert len(FORM_OPTIONS["style"]) == 4
        assert len(FORM_OPTIONS["phonetic"]) == 2
        assert FORM_OPTIONS["max_traits"] == 3
