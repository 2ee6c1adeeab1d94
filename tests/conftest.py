"""测试配置和共享 Fixtures。"""

import pytest

from src.models import MediaType, RecommendationRequest
from src.services import JikanAPIError, RecommendationService


# ============================================================================
# Sample Jikan Records
# ============================================================================

def make_manga(mal_id: int, title: str, **extra) -> dict:
    """构造 Jikan manga 记录。"""
    item = {
        "mal_id": mal_id,
        "title": title,
        "url": f"https://myanimelist.net/manga/{mal_id}",
        "images": {"jpg": {"image_url": f"https://cdn.myanimelist.net/images/manga/{mal_id}.jpg"}},
        "type": "Manga",
        "chapters": 100 + mal_id,
        "score": 8.5,
        "synopsis": f"Synopsis of {title}",
        "authors": [{"mal_id": 1, "name": "Miura, Kentarou"}],
        "genres": [{"mal_id": 1, "name": "Action"}, {"mal_id": 8, "name": "Drama"}],
    }
    item.update(extra)
    return item


def make_anime(mal_id: int, title: str, **extra) -> dict:
    """构造 Jikan anime 记录。"""
    item = {
        "mal_id": mal_id,
        "title": title,
        "url": f"https://myanimelist.net/anime/{mal_id}",
        "images": {"jpg": {"image_url": f"https://cdn.myanimelist.net/images/anime/{mal_id}.jpg"}},
        "type": "TV",
        "episodes": 12 + mal_id,
        "score": 8.1,
        "synopsis": f"Synopsis of {title}",
        "studios": [{"mal_id": 4, "name": "Bones"}],
        "genres": [{"mal_id": 1, "name": "Action"}],
    }
    item.update(extra)
    return item


# ============================================================================
# Mock Services
# ============================================================================

class MockJikanClient:
    """测试用 Mock Jikan 客户端。

    通过设置 search_results / recommendations / details / top 控制返回值。
    通过设置 fail_recommendations / fail_details / fail_top 模拟失败。
    """

    def __init__(self):
        self.search_results = []
        self.recommendations = []
        self.details = {}
        self.top = []
        self.fail_recommendations = False
        self.fail_details = False
        self.fail_top = False
        self.calls = []

    def search(self, media_type, title, limit=1):
        self.calls.append(("search", media_type, title))
        return self.search_results[:limit]

    def get_recommendations(self, media_type, mal_id):
        self.calls.append(("recommendations", media_type, mal_id))
        if self.fail_recommendations:
            raise JikanAPIError("Mock recommendations failure")
        return self.recommendations

    def get_details(self, media_type, mal_id):
        self.calls.append(("details", media_type, mal_id))
        if self.fail_details:
            raise JikanAPIError("Mock details failure")
        return self.details[mal_id]

    def get_top(self, media_type, limit=5):
        self.calls.append(("top", media_type, limit))
        if self.fail_top:
            raise JikanAPIError("Mock top failure")
        return self.top[:limit]

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def mock_jikan() -> MockJikanClient:
    """创建 Mock Jikan 客户端（基础作品 Berserk，无推荐）。"""
    client = MockJikanClient()
    client.search_results = [make_manga(2, "Berserk")]
    client.top = [
        make_manga(2, "Berserk"),
        make_manga(13, "One Piece"),
        make_manga(1706, "JoJo no Kimyou na Bouken Part 7: Steel Ball Run"),
        make_manga(656, "Vagabond"),
        make_manga(1, "Monster"),
    ]
    return client


@pytest.fixture
def mock_jikan_with_recommendations(mock_jikan: MockJikanClient) -> MockJikanClient:
    """创建带有 6 条官方推荐的 Mock Jikan 客户端。"""
    titles = {
        656: "Vagabond",
        3009: "Claymore",
        25: "Fullmetal Alchemist",
        583: "Blade of the Immortal",
        44347: "Vinland Saga",
        642: "Vinland Saga (Old)",
    }
    mock_jikan.recommendations = [
        {"entry": {"mal_id": mal_id, "title": title}, "votes": 100 - i}
        for i, (mal_id, title) in enumerate(titles.items())
    ]
    mock_jikan.details = {
        mal_id: make_manga(mal_id, title) for mal_id, title in titles.items()
    }
    return mock_jikan


@pytest.fixture
def service(mock_jikan: MockJikanClient) -> RecommendationService:
    """创建使用 Mock 客户端的 RecommendationService。"""
    return RecommendationService(jikan_client=mock_jikan)


@pytest.fixture
def manga_request() -> RecommendationRequest:
    """创建示例 manga 请求。"""
    return RecommendationRequest(titles=["Berserk"], media_type=MediaType.MANGA)
