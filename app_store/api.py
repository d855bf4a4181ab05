"""
App Store 接口封装

负责拼接 iTunes 接口 / App Store 网页地址并获取原始响应文本
"""

import logging
from urllib.parse import quote, urlencode

from utils.http_client import get_text

from .constants import (
    APP_PAGE_URL,
    DEFAULT_DEVICE,
    DEFAULT_STORE_FRONT,
    LIST_URL,
    LOOKUP_URL,
    MARKETS,
    MINIMAL_HEADERS,
    RATINGS_DISPLAYABLE_KIND,
    RATINGS_URL,
    REVIEWS_URL,
    SEARCH_URL,
    STORE_FRONT_HEADER,
    STORE_FRONT_PLATFORM,
    SUGGEST_URL,
)


logger = logging.getLogger(__name__)


def store_id(country_code: str | None) -> int:
    """国家代码转换为店面编号，未知国家返回美区编号"""
    if not country_code:
        return DEFAULT_STORE_FRONT
    return MARKETS.get(country_code.upper(), DEFAULT_STORE_FRONT)


class AppStoreWebAPI:
    """App Store 接口客户端"""

    @staticmethod
    async def search(
        term: str,
        country: str,
        limit: int,
        lang: str | None = None,
        request_options: dict | None = None,
        entity: str = DEFAULT_DEVICE,
    ) -> str:
        """
        调用 iTunes Search 接口

        Args:
            term: 搜索关键词
            country: 国家代码
            limit: 返回数量上限
            lang: 语言代码（可选）
            request_options: 透传的传输配置
            entity: 设备类型（software / iPadSoftware / macSoftware）

        Returns:
            JSON 响应文本
        """
        params = {
            "term": term,
            "country": country,
            "media": "software",
            "entity": entity,
            "limit": str(limit),
        }
        if lang:
            params["lang"] = lang

        url = f"{SEARCH_URL}?{urlencode(params)}"
        logger.info(f"搜索应用: term='{term}', country={country}, limit={limit}")
        return await get_text(url, request_options=request_options)

    @staticmethod
    async def lookup(
        ids: list[int | str],
        id_field: str,
        country: str,
        lang: str | None = None,
        request_options: dict | None = None,
    ) -> str:
        """
        调用 iTunes Lookup 接口

        Args:
            ids: trackId / bundleId / artistId 列表
            id_field: 查询字段（id 或 bundleId）
            country: 国家代码
            lang: 语言代码（可选）
            request_options: 透传的传输配置

        Returns:
            JSON 响应文本
        """
        params = {
            id_field: ",".join(str(value) for value in ids),
            "country": country,
            "entity": "software",
        }
        if lang:
            params["lang"] = lang

        url = f"{LOOKUP_URL}?{urlencode(params, safe=',')}"
        logger.info(f"查询应用: {id_field}={params[id_field]}, country={country}")
        return await get_text(url, request_options=request_options)

    @staticmethod
    async def fetch_app_page(
        app_id: int, country: str, request_options: dict | None = None
    ) -> str:
        """
        获取应用详情页面的 HTML 内容

        Args:
            app_id: App ID
            country: 国家代码
            request_options: 透传的传输配置

        Returns:
            HTML 内容
        """
        url = APP_PAGE_URL.format(country=country.lower(), app_id=app_id)
        logger.info(f"获取应用页面: {url}")
        return await get_text(url, headers=MINIMAL_HEADERS, request_options=request_options)

    @staticmethod
    async def fetch_ratings_page(
        app_id: int, country: str, request_options: dict | None = None
    ) -> str:
        """
        获取评分页 HTML，请求头中需要携带店面编号

        Args:
            app_id: App ID
            country: 国家代码
            request_options: 透传的传输配置

        Returns:
            HTML 内容（应用不存在时可能为空字符串）
        """
        url = (
            RATINGS_URL.format(country=country.lower(), app_id=app_id)
            + f"?displayable-kind={RATINGS_DISPLAYABLE_KIND}"
        )
        headers = {STORE_FRONT_HEADER: f"{store_id(country)},{STORE_FRONT_PLATFORM}"}
        logger.info(f"获取评分页面: {url}")
        return await get_text(url, headers=headers, request_options=request_options)

    @staticmethod
    async def fetch_suggestions(term: str, request_options: dict | None = None) -> str:
        """
        获取搜索联想词（plist XML）

        Args:
            term: 输入的关键词
            request_options: 透传的传输配置

        Returns:
            XML 响应文本
        """
        url = f"{SUGGEST_URL}?clientApplication=Software&term={quote(term, safe='')}"
        logger.info(f"获取联想词: term='{term}'")
        return await get_text(url, request_options=request_options)

    @staticmethod
    async def fetch_reviews(
        app_id: int,
        country: str,
        page: int,
        sort: str,
        request_options: dict | None = None,
    ) -> str:
        """
        获取评论 RSS（JSON）

        Args:
            app_id: App ID
            country: 国家代码
            page: 页码（1-10）
            sort: 上游排序参数
            request_options: 透传的传输配置

        Returns:
            JSON 响应文本
        """
        url = REVIEWS_URL.format(country=country.lower(), page=page, app_id=app_id, sort=sort)
        logger.info(f"获取评论: {url}")
        return await get_text(url, request_options=request_options)

    @staticmethod
    async def fetch_list(
        collection: str,
        category: int | None,
        num: int,
        country: str,
        request_options: dict | None = None,
    ) -> str:
        """
        获取排行榜 RSS（JSON）

        Args:
            collection: 排行榜类型
            category: 分类 genreId（可选）
            num: 返回数量
            country: 国家代码（转换为店面编号）
            request_options: 透传的传输配置

        Returns:
            JSON 响应文本
        """
        genre = f"genre={category}/" if category else ""
        url = LIST_URL.format(
            collection=collection, genre=genre, num=num, store_front=store_id(country)
        )
        logger.info(f"获取排行榜: {url}")
        return await get_text(url, request_options=request_options)
