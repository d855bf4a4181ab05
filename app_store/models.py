"""
App Store 数据记录

每次调用都会新建记录，返回后不再修改
"""

from dataclasses import dataclass, field, fields
from typing import Any


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _export(value: Any) -> Any:
    if isinstance(value, Record):
        return value.to_dict()
    if isinstance(value, list):
        return [_export(item) for item in value]
    if isinstance(value, dict):
        return {key: _export(item) for key, item in value.items()}
    return value


class Record:
    """带 to_dict 的记录基类，导出为 camelCase 字段"""

    # 值为 None 时不导出的字段
    omit_if_none: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None and item.name in self.omit_if_none:
                continue
            data[_camel(item.name)] = _export(value)
        return data


def empty_histogram() -> dict[int, int]:
    """五个星级全部存在、计数为 0 的直方图"""
    return {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}


@dataclass
class App(Record):
    """应用详情"""

    id: int | None
    app_id: str | None
    title: str | None = None
    url: str | None = None
    description: str | None = None
    icon: str | None = None
    icons: dict[int, str] = field(default_factory=dict)
    genres: list[str] = field(default_factory=list)
    genre_ids: list[str] = field(default_factory=list)
    primary_genre: str | None = None
    primary_genre_id: int | None = None
    content_rating: str | None = None
    languages: list[str] = field(default_factory=list)
    size: str | None = None
    required_os_version: str | None = None
    released: str | None = None
    updated: str | None = None
    release_notes: str | None = None
    version: str | None = None
    price: float | None = None
    currency: str | None = None
    free: bool = False
    developer_id: int | None = None
    developer: str | None = None
    developer_url: str | None = None
    developer_website: str | None = None
    score: float | None = None
    reviews: int | None = None
    current_version_score: float | None = None
    current_version_reviews: int | None = None
    screenshots: list[str] = field(default_factory=list)
    ipad_screenshots: list[str] = field(default_factory=list)
    appletv_screenshots: list[str] = field(default_factory=list)
    supported_devices: list[str] = field(default_factory=list)
    histogram: dict[int, int] | None = None

    omit_if_none = ("histogram",)

    @property
    def has_screenshots(self) -> bool:
        return bool(self.screenshots or self.ipad_screenshots or self.appletv_screenshots)


@dataclass
class Ratings(Record):
    """评分总数与 1-5 星直方图"""

    ratings: int = 0
    histogram: dict[int, int] = field(default_factory=empty_histogram)


@dataclass
class VersionHistory(Record):
    """版本历史条目"""

    version_display: str
    release_date: str = ""
    release_notes: str | None = None

    omit_if_none = ("release_notes",)


@dataclass
class PrivacyType(Record):
    """隐私数据类型"""

    privacy_type: str
    name: str
    description: str
    data_categories: list[str]
    purposes: list[str]


@dataclass
class PrivacyDetails(Record):
    """隐私详情，未找到的字段直接省略"""

    privacy_policy_url: str | None = None
    privacy_types: list[PrivacyType] | None = None

    omit_if_none = ("privacy_policy_url", "privacy_types")


@dataclass
class Suggestion(Record):
    """搜索联想词"""

    term: str


@dataclass
class Review(Record):
    """用户评论"""

    id: str | None
    user_name: str | None = None
    user_url: str | None = None
    version: str | None = None
    score: int = 0
    title: str | None = None
    text: str | None = None
    url: str | None = None
    updated: str | None = None


@dataclass
class ListedApp(Record):
    """排行榜 RSS 中的应用摘要"""

    id: int | None
    app_id: str | None
    title: str | None = None
    icon: str | None = None
    url: str | None = None
    price: float = 0.0
    currency: str | None = None
    free: bool = True
    description: str | None = None
    developer: str | None = None
    developer_url: str | None = None
    developer_id: int | None = None
    genre: str | None = None
    genre_id: int | None = None
    released: str | None = None
