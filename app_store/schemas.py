"""
上游响应结构校验

JSON/XML 在进入字段提取前先经过 pydantic 模型校验，
结构不符时抛出 UpstreamShapeError，整个操作中止
"""

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from utils.error_handling import UpstreamShapeError


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class UpstreamModel(BaseModel):
    """上游模型基类：允许未声明的额外字段"""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


# ======= iTunes Search / Lookup =======


class CatalogEntry(UpstreamModel):
    """Search/Lookup 接口中的单个条目"""

    kind: str | None = None
    wrapper_type: str | None = Field(default=None, alias="wrapperType")
    track_id: int | None = Field(default=None, alias="trackId")
    bundle_id: str | None = Field(default=None, alias="bundleId")
    track_name: str | None = Field(default=None, alias="trackName")
    track_view_url: str | None = Field(default=None, alias="trackViewUrl")
    description: str | None = None
    artwork_url_60: str | None = Field(default=None, alias="artworkUrl60")
    artwork_url_100: str | None = Field(default=None, alias="artworkUrl100")
    artwork_url_512: str | None = Field(default=None, alias="artworkUrl512")
    genres: list[str] | None = None
    genre_ids: list[str] | None = Field(default=None, alias="genreIds")
    primary_genre_name: str | None = Field(default=None, alias="primaryGenreName")
    primary_genre_id: int | None = Field(default=None, alias="primaryGenreId")
    content_advisory_rating: str | None = Field(default=None, alias="contentAdvisoryRating")
    language_codes: list[str] | None = Field(default=None, alias="languageCodesISO2A")
    file_size_bytes: str | None = Field(default=None, alias="fileSizeBytes")
    minimum_os_version: str | None = Field(default=None, alias="minimumOsVersion")
    release_date: str | None = Field(default=None, alias="releaseDate")
    current_version_release_date: str | None = Field(default=None, alias="currentVersionReleaseDate")
    release_notes: str | None = Field(default=None, alias="releaseNotes")
    version: str | None = None
    price: float | None = None
    currency: str | None = None
    artist_id: int | None = Field(default=None, alias="artistId")
    artist_name: str | None = Field(default=None, alias="artistName")
    artist_view_url: str | None = Field(default=None, alias="artistViewUrl")
    seller_url: str | None = Field(default=None, alias="sellerUrl")
    average_user_rating: float | None = Field(default=None, alias="averageUserRating")
    user_rating_count: int | None = Field(default=None, alias="userRatingCount")
    average_user_rating_current: float | None = Field(
        default=None, alias="averageUserRatingForCurrentVersion"
    )
    user_rating_count_current: int | None = Field(
        default=None, alias="userRatingCountForCurrentVersion"
    )
    screenshot_urls: list[str] | None = Field(default=None, alias="screenshotUrls")
    ipad_screenshot_urls: list[str] | None = Field(default=None, alias="ipadScreenshotUrls")
    appletv_screenshot_urls: list[str] | None = Field(default=None, alias="appletvScreenshotUrls")
    supported_devices: list[str] | None = Field(default=None, alias="supportedDevices")


class LookupResponse(UpstreamModel):
    """Search/Lookup 接口响应"""

    result_count: int | None = Field(default=None, alias="resultCount")
    results: list[CatalogEntry]


# ======= 联想词 plist =======


class SuggestDict(UpstreamModel):
    """联想词条目，string 字段可能是单值也可能是列表"""

    string: str | list[str] | None = None


class SuggestArray(UpstreamModel):
    """联想词数组，dict 字段可能是单个条目也可能是列表（空 dict 为 None）"""

    dict_: SuggestDict | list[SuggestDict | None] | None = Field(default=None, alias="dict")


class PlistRootDict(UpstreamModel):
    array: SuggestArray | str | None = None


class Plist(UpstreamModel):
    dict_: PlistRootDict | None = Field(default=None, alias="dict")


class SuggestResponse(UpstreamModel):
    """联想词接口响应（plist 文档）"""

    plist: Plist | None = None


# ======= 评论 RSS =======


class FeedLabel(UpstreamModel):
    label: str | None = None


class FeedAuthor(UpstreamModel):
    name: FeedLabel | None = None
    uri: FeedLabel | None = None


class FeedLinkAttributes(UpstreamModel):
    href: str | None = None


class FeedLink(UpstreamModel):
    attributes: FeedLinkAttributes | None = None


class FeedEntry(UpstreamModel):
    """RSS 中的单条评论"""

    id: FeedLabel | None = None
    author: FeedAuthor | None = None
    title: FeedLabel | None = None
    content: FeedLabel | None = None
    updated: FeedLabel | None = None
    version: FeedLabel | None = Field(default=None, alias="im:version")
    rating: FeedLabel | None = Field(default=None, alias="im:rating")
    link: FeedLink | list[FeedLink] | None = None


class Feed(UpstreamModel):
    entry: FeedEntry | list[FeedEntry] | None = None


class ReviewsFeed(UpstreamModel):
    """评论 RSS 响应"""

    feed: Feed


# ======= 排行榜 RSS =======


class ListEntryIdAttributes(UpstreamModel):
    im_id: str | None = Field(default=None, alias="im:id")
    bundle_id: str | None = Field(default=None, alias="im:bundleId")


class ListEntryId(UpstreamModel):
    label: str | None = None
    attributes: ListEntryIdAttributes | None = None


class ListPriceAttributes(UpstreamModel):
    amount: str | None = None
    currency: str | None = None


class ListPrice(UpstreamModel):
    label: str | None = None
    attributes: ListPriceAttributes | None = None


class ListArtistAttributes(UpstreamModel):
    href: str | None = None


class ListArtist(UpstreamModel):
    label: str | None = None
    attributes: ListArtistAttributes | None = None


class ListCategoryAttributes(UpstreamModel):
    im_id: str | None = Field(default=None, alias="im:id")
    label: str | None = None


class ListCategory(UpstreamModel):
    attributes: ListCategoryAttributes | None = None


class ListEntry(UpstreamModel):
    """排行榜中的单个应用"""

    id: ListEntryId | None = None
    name: FeedLabel | None = Field(default=None, alias="im:name")
    image: FeedLabel | list[FeedLabel] | None = Field(default=None, alias="im:image")
    summary: FeedLabel | None = None
    price: ListPrice | None = Field(default=None, alias="im:price")
    artist: ListArtist | None = Field(default=None, alias="im:artist")
    category: ListCategory | None = None
    release_date: FeedLabel | None = Field(default=None, alias="im:releaseDate")
    link: FeedLink | list[FeedLink] | None = None


class ListFeedBody(UpstreamModel):
    entry: ListEntry | list[ListEntry] | None = None


class ListFeed(UpstreamModel):
    """排行榜 RSS 响应"""

    feed: ListFeedBody


# ======= 校验入口 =======


def validate_model(model: type[ModelT], data: Any, source: str) -> ModelT:
    """
    用指定模型校验已解析的数据

    Args:
        model: pydantic 模型
        data: 已解析的 JSON/XML 数据
        source: 数据来源名称（用于错误信息）

    Returns:
        校验通过的模型实例

    Raises:
        UpstreamShapeError: 结构不符合模型
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"{source} 响应结构校验失败: {e.error_count()} 个错误")
        raise UpstreamShapeError(f"{source} API response validation failed: {e}") from e


def parse_json(body: str, source: str) -> Any:
    """解析 JSON 文本，语法错误同样视为结构错误"""
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        logger.error(f"{source} 响应不是合法 JSON: {e}")
        raise UpstreamShapeError(f"{source} API response is not valid JSON: {e}") from e


def validate_lookup_response(body: str, source: str = "Lookup") -> LookupResponse:
    return validate_model(LookupResponse, parse_json(body, source), source)


def validate_suggest_response(data: Any) -> SuggestResponse:
    return validate_model(SuggestResponse, data, "Suggest")


def validate_reviews_feed(body: str) -> ReviewsFeed:
    return validate_model(ReviewsFeed, parse_json(body, "Reviews"), "Reviews")


def validate_list_feed(body: str) -> ListFeed:
    return validate_model(ListFeed, parse_json(body, "List"), "List")
