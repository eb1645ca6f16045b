"""测试配置和共享 Fixtures。"""

import json

import pytest

from config import Settings
from hanname.models import NameProfile


def make_envelope(content=None, **message_fields) -> dict:
    """构造 chat-completion 响应信封。"""
    message = {"role": "assistant", **message_fields}
    if content is not None:
        message["content"] = content
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "deepseek-ai/DeepSeek-R1",
        "choices": [{"index": 0, "message": message, "finish_reason": "stop"}],
    }


EMMA_ANSWER = {
    "name": "艾玛",
    "pinyin": "ài mǎ",
    "meaning": "美丽优雅",
    "reason": "温和又有创意，名字现代且易读。",
}


# ============================================================================
# Mock Services
# ============================================================================

class MockLLMService:
    """测试用 Mock LLM 服务。

    可以通过设置 response 属性来控制返回的响应信封。
    可以通过设置 error 来模拟失败。
    """

    def __init__(self):
        self.response = make_envelope(json.dumps(EMMA_ANSWER, ensure_ascii=False))
        self.error = None
        self.call_count = 0
        self.last_messages = None

    def complete(self, messages):
        self.call_count += 1
        self.last_messages = messages

        if self.error is not None:
            raise self.error

        return self.response

    def reset(self):
        """重置状态。"""
        self.call_count = 0
        self.last_messages = None


# ============================================================================
# Profile Fixtures
# ============================================================================

@pytest.fixture
def sample_profile() -> NameProfile:
    """创建示例 Profile。"""
    return NameProfile(
        english_name="Emma",
        gender="female",
        traits=("gentle", "creative"),
        style="modern",
        phonetic="native-like",
    )


@pytest.fixture
def minimal_profile() -> NameProfile:
    """创建最小化 Profile（用于边界测试）。"""
    return NameProfile(english_name="Jo")


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def mock_llm() -> MockLLMService:
    """创建 Mock LLM 服务。"""
    return MockLLMService()


@pytest.fixture
def settings() -> Settings:
    """创建带测试 API Key 的配置。"""
    return Settings(
        api_key="sk-test",
        base_url="https://llm.example.test/v1",
        model="deepseek-ai/DeepSeek-R1",
    )


@pytest.fixture
def client(settings, mock_llm):
    """创建使用 Mock LLM 的 Flask 测试客户端。"""
    from app import create_app

    flask_app = create_app(settings=settings, llm_service=mock_llm)
    flask_app.config["TESTING"] = True
    return flask_app.test_client()
