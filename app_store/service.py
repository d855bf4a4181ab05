"""
App Store 查询服务

对外提供 app / search / ratings / version_history / privacy / suggest /
developer / reviews / list_apps 九个查询操作。

app 查询的编排顺序：
1. 按 trackId 或 bundleId 查询（两者都给时以 trackId 为准）
2. 没有结果时抛出 AppNotFoundError
3. 三类截图都为空时抓取应用页面补全截图（失败时全部为空列表）
4. 需要时抓取评分直方图（失败时不设置直方图）
第 3、4 步是尽力而为的步骤，失败只记录日志，不影响整体结果
"""

import logging

from utils.config_manager import get_config
from utils.error_handling import (
    AppNotFoundError,
    Failure,
    InputValidationError,
    Ok,
    capture,
    describe_failure,
)

from .api import AppStoreWebAPI
from .constants import (
    CATEGORY,
    COLLECTION,
    DEFAULT_COLLECTION,
    DEFAULT_DEVICE,
    DEFAULT_LIST_NUM,
    DEFAULT_SEARCH_NUM,
    DEVICE,
    LIST_MAX_NUM,
    REVIEW_SORTS,
    REVIEWS_MAX_PAGE,
    SCREENSHOT_DEVICES,
)
from .models import App, ListedApp, PrivacyDetails, Ratings, Review, Suggestion, VersionHistory
from .normalizer import clean_app, clean_list_entry, clean_review, is_software_wrapper
from .pagination import compute_limit, page_ids, paginate
from .parser import AppStoreParser
from .plist import as_list, decode_suggest_body
from .schemas import validate_list_feed, validate_lookup_response, validate_reviews_feed


logger = logging.getLogger(__name__)


# ======= 辅助函数 =======


def _resolve_country(country: str | None) -> str:
    return (country or get_config().default_country).lower()


def _resolve_lang(lang: str | None) -> str | None:
    return lang or get_config().default_lang or None


def _require(value, message: str) -> None:
    if value is None or value == "":
        raise InputValidationError(message)


def _empty_screenshots() -> dict[str, list[str]]:
    return {field_name: [] for field_name in SCREENSHOT_DEVICES}


async def _lookup(
    ids: list[int | str],
    id_field: str,
    country: str,
    lang: str | None,
    request_options: dict | None,
) -> list[App]:
    """调用 Lookup 接口并规范化其中的应用条目"""
    body = await AppStoreWebAPI.lookup(ids, id_field, country, lang, request_options)
    response = validate_lookup_response(body)
    return [clean_app(entry) for entry in response.results if is_software_wrapper(entry)]


async def _scrape_screenshots(
    track_id: int | None, country: str, request_options: dict | None
) -> dict[str, list[str]]:
    """抓取应用页面中的截图"""
    _require(track_id, "id is required to scrape screenshots")
    html_content = await AppStoreWebAPI.fetch_app_page(track_id, country, request_options)
    return AppStoreParser.parse_screenshots(html_content, get_config().markup_version)


# ======= 查询操作 =======


async def app(
    id: int | None = None,
    bundle_id: str | None = None,
    country: str | None = None,
    lang: str | None = None,
    include_ratings: bool = False,
    request_options: dict | None = None,
) -> App:
    """
    获取应用详情

    Args:
        id: trackId
        bundle_id: bundleId（与 id 至少提供一个）
        country: 国家代码
        lang: 语言代码
        include_ratings: 是否附带评分直方图
        request_options: 透传的传输配置

    Returns:
        App: 应用详情

    Raises:
        InputValidationError: id 和 bundle_id 都未提供
        AppNotFoundError: 查询不到应用
    """
    if not id and not bundle_id:
        raise InputValidationError("Either id or bundle_id is required")

    country = _resolve_country(country)
    lang = _resolve_lang(lang)
    if id:
        apps = await _lookup([id], "id", country, lang, request_options)
    else:
        apps = await _lookup([bundle_id], "bundleId", country, lang, request_options)

    if not apps:
        raise AppNotFoundError(f"App not found: {id or bundle_id}")

    app_data = apps[0]

    # 接口没有返回截图时从应用页面抓取
    if not app_data.has_screenshots:
        outcome = await capture(
            "screenshots", _scrape_screenshots(app_data.id, country, request_options)
        )
        if isinstance(outcome, Ok):
            screenshots = outcome.value
        else:
            logger.warning(f"截图抓取失败，使用空列表: {describe_failure(outcome)}")
            screenshots = _empty_screenshots()

        app_data.screenshots = screenshots["screenshots"]
        app_data.ipad_screenshots = screenshots["ipad_screenshots"]
        app_data.appletv_screenshots = screenshots["appletv_screenshots"]

    # 评分直方图并非所有应用都有，失败时保持未设置
    if include_ratings:
        outcome = await capture(
            "histogram", ratings(id=app_data.id, country=country, request_options=request_options)
        )
        if isinstance(outcome, Failure):
            logger.warning(f"评分直方图获取失败，已跳过: {describe_failure(outcome)}")
        else:
            app_data.histogram = outcome.value.histogram

    return app_data


async def search(
    term: str,
    num: int = DEFAULT_SEARCH_NUM,
    page: int = 1,
    country: str | None = None,
    lang: str | None = None,
    ids_only: bool = False,
    request_options: dict | None = None,
    device: str = DEFAULT_DEVICE,
) -> list[App] | list[int]:
    """
    搜索应用

    接口没有 offset 参数：请求 page * num 条结果后在本地切片，
    页码越大请求的结果越多

    Args:
        term: 搜索关键词
        num: 每页数量
        page: 页码（从 1 开始）
        country: 国家代码
        lang: 语言代码
        ids_only: 只返回 trackId 列表
        request_options: 透传的传输配置
        device: 设备类型，取值见 constants.DEVICE

    Returns:
        App 列表，或 ids_only 时的 trackId 列表
    """
    _require(term, "term is required")
    if device not in DEVICE.values():
        raise InputValidationError(f"device must be one of {list(DEVICE.values())}, got {device!r}")
    limit = compute_limit(num, page)

    body = await AppStoreWebAPI.search(
        term, _resolve_country(country), limit, _resolve_lang(lang), request_options, device
    )
    response = validate_lookup_response(body, source="Search")
    entries = paginate(response.results, num, page)

    logger.info(f"搜索完成: term='{term}', page={page}, 返回 {len(entries)} 条")

    if ids_only:
        return page_ids(entries)

    return [clean_app(entry) for entry in entries]


async def ratings(
    id: int,
    country: str | None = None,
    request_options: dict | None = None,
) -> Ratings:
    """
    获取评分总数和 1-5 星直方图

    Raises:
        InputValidationError: 未提供 id
        AppNotFoundError: 评分页返回空内容
    """
    _require(id, "id is required")

    html_content = await AppStoreWebAPI.fetch_ratings_page(
        id, _resolve_country(country), request_options
    )
    if len(html_content) == 0:
        raise AppNotFoundError("App not found (404)")

    return AppStoreParser.parse_ratings(html_content, get_config().markup_version)


async def version_history(
    id: int,
    country: str | None = None,
    request_options: dict | None = None,
) -> list[VersionHistory]:
    """获取版本历史（最新在前，保持页面顺序）"""
    _require(id, "id is required")

    html_content = await AppStoreWebAPI.fetch_app_page(
        id, _resolve_country(country), request_options
    )
    return AppStoreParser.parse_version_history(html_content, get_config().markup_version)


async def privacy(
    id: int,
    country: str | None = None,
    request_options: dict | None = None,
) -> PrivacyDetails:
    """获取隐私政策链接和隐私数据类型"""
    _require(id, "id is required")

    html_content = await AppStoreWebAPI.fetch_app_page(
        id, _resolve_country(country), request_options
    )
    return AppStoreParser.parse_privacy(html_content, get_config().markup_version)


async def suggest(term: str, request_options: dict | None = None) -> list[Suggestion]:
    """获取搜索联想词"""
    _require(term, "term is required")

    body = await AppStoreWebAPI.fetch_suggestions(term, request_options)
    suggestions = decode_suggest_body(body)
    logger.info(f"联想词: term='{term}', 找到 {len(suggestions)} 条")
    return suggestions


async def developer(
    dev_id: int,
    country: str | None = None,
    lang: str | None = None,
    request_options: dict | None = None,
) -> list[App]:
    """
    获取开发者名下的全部应用

    Raises:
        InputValidationError: 未提供 dev_id
        AppNotFoundError: 开发者不存在或没有应用
    """
    _require(dev_id, "dev_id is required")

    apps = await _lookup(
        [dev_id], "id", _resolve_country(country), _resolve_lang(lang), request_options
    )
    if not apps:
        raise AppNotFoundError(f"Developer not found: {dev_id}")
    return apps


async def reviews(
    id: int,
    country: str | None = None,
    page: int = 1,
    sort: str = "mostRecent",
    request_options: dict | None = None,
) -> list[Review]:
    """
    获取用户评论（每页 50 条，最多 10 页）

    Args:
        id: trackId
        country: 国家代码
        page: 页码（1-10）
        sort: mostRecent 或 mostHelpful
        request_options: 透传的传输配置

    Returns:
        list[Review]: 评论列表
    """
    _require(id, "id is required")
    if not 1 <= page <= REVIEWS_MAX_PAGE:
        raise InputValidationError(f"page must be between 1 and {REVIEWS_MAX_PAGE}, got {page}")
    if sort not in REVIEW_SORTS:
        raise InputValidationError(f"sort must be one of {list(REVIEW_SORTS)}, got {sort!r}")

    body = await AppStoreWebAPI.fetch_reviews(
        id, _resolve_country(country), page, REVIEW_SORTS[sort], request_options
    )
    feed = validate_reviews_feed(body).feed

    # 第一页的首条可能是应用信息而不是评论
    return [clean_review(entry) for entry in as_list(feed.entry) if entry.rating is not None]


async def list_apps(
    collection: str = DEFAULT_COLLECTION,
    category: int | None = None,
    num: int = DEFAULT_LIST_NUM,
    country: str | None = None,
    lang: str | None = None,
    full_detail: bool = False,
    request_options: dict | None = None,
) -> list[ListedApp] | list[App]:
    """
    获取排行榜应用

    Args:
        collection: 排行榜类型，取值见 constants.COLLECTION
        category: 分类 genreId，取值见 constants.CATEGORY
        num: 返回数量（1-200）
        country: 国家代码
        lang: 语言代码（仅 full_detail 时使用）
        full_detail: 是否通过 Lookup 接口获取完整详情
        request_options: 透传的传输配置

    Returns:
        ListedApp 列表，或 full_detail 时的 App 列表（保持排行顺序）
    """
    if collection not in COLLECTION.values():
        raise InputValidationError(f"Invalid collection: {collection!r}")
    if category is not None and category not in CATEGORY.values():
        raise InputValidationError(f"Invalid category: {category!r}")
    if not 1 <= num <= LIST_MAX_NUM:
        raise InputValidationError(f"num must be between 1 and {LIST_MAX_NUM}, got {num}")

    country = _resolve_country(country)
    body = await AppStoreWebAPI.fetch_list(collection, category, num, country, request_options)
    entries = [clean_list_entry(entry) for entry in as_list(validate_list_feed(body).feed.entry)]

    logger.info(f"排行榜: collection={collection}, category={category}, 返回 {len(entries)} 条")

    if not full_detail or not entries:
        return entries

    ids = [entry.id for entry in entries if entry.id is not None]
    apps = await _lookup(ids, "id", country, _resolve_lang(lang), request_options)
    order = {app_id: index for index, app_id in enumerate(ids)}
    return sorted(apps, key=lambda app_data: order.get(app_data.id, len(order)))
