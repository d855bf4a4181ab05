"""
App Store HTML 解析器

负责从应用详情页和评分页中提取截图、评分直方图、版本历史和隐私信息。
页面选择器来自 constants.MARKUP_STRATEGIES，按页面结构版本选择；
所有节点在使用前都做存在性检查，结构缺失时返回空结果而不是抛错
"""

import logging
import re
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from .constants import (
    MARKUP_STRATEGIES,
    PRIVACY_POLICY_LABEL,
    SCREENSHOT_CANONICAL_SUFFIX,
    SCREENSHOT_DEVICES,
    SCREENSHOT_SIZE_PATTERN,
)
from .models import PrivacyDetails, PrivacyType, Ratings, VersionHistory, empty_histogram


logger = logging.getLogger(__name__)

_WIDTH_RX = re.compile(r"(\d+)w")
_INT_RX = re.compile(r"\d+")
_SCREENSHOT_SIZE_RX = re.compile(SCREENSHOT_SIZE_PATTERN)


@dataclass(frozen=True)
class MarkupStrategy:
    """某一版页面结构对应的选择器集合"""

    version: str
    selectors: dict[str, str]

    @classmethod
    def for_version(cls, version: str) -> "MarkupStrategy":
        """
        按版本号获取选择器集合

        Raises:
            ValueError: 未注册的页面结构版本（MARKUP_VERSION 配置错误）
        """
        if version not in MARKUP_STRATEGIES:
            raise ValueError(
                f"MARKUP_VERSION must be one of {sorted(MARKUP_STRATEGIES)}, got {version!r}"
            )
        return cls(version=version, selectors=MARKUP_STRATEGIES[version])

    def select(self, name: str, **params: str) -> str:
        selector = self.selectors[name]
        return selector.format(**params) if params else selector

    def dialog_select(self, name: str) -> str:
        return f"{self.selectors['dialog']} {self.selectors[name]}"


def make_soup(html_content: str) -> BeautifulSoup:
    """优先使用 lxml 解析，失败时退回内置解析器"""
    try:
        return BeautifulSoup(html_content, "lxml")
    except Exception:
        return BeautifulSoup(html_content, "html.parser")


def extract_screenshot_url(srcset: str) -> str | None:
    """
    从 srcset 中取宽度最大的候选地址并规范化尺寸后缀

    srcset 格式: "url1 300w, url2 600w, ..."

    Args:
        srcset: 响应式图片候选列表

    Returns:
        规范化后的地址，没有可用候选时返回 None
    """
    best_url = None
    best_width = -1

    for candidate in srcset.split(","):
        parts = candidate.strip().split()
        if not parts:
            continue
        width_match = _WIDTH_RX.search(parts[1]) if len(parts) > 1 else None
        width = int(width_match.group(1)) if width_match else 0
        # 宽度相同时保留先出现的候选
        if width > best_width:
            best_url, best_width = parts[0], width

    if not best_url:
        return None

    return _SCREENSHOT_SIZE_RX.sub(SCREENSHOT_CANONICAL_SUFFIX, best_url)


def joined_text(node: Tag, selector: str) -> str:
    """拼接所有匹配节点的文本并去掉首尾空白"""
    return "".join(match.get_text() for match in node.select(selector)).strip()


def _first_int(text: str) -> int:
    match = _INT_RX.search(text.replace(",", ""))
    return int(match.group(0)) if match else 0


class AppStoreParser:
    """App Store 页面解析器"""

    @staticmethod
    def parse_ratings(html_content: str, markup_version: str) -> Ratings:
        """
        从评分页提取评分总数和 1-5 星直方图

        星级计数按 5 到 1 的顺序排列，第 i 个元素对应 5 - i 星。
        总数无法解析时为 0；缺失的星级计数为 0

        Args:
            html_content: 评分页 HTML
            markup_version: 页面结构版本

        Returns:
            Ratings: 评分总数与完整直方图
        """
        strategy = MarkupStrategy.for_version(markup_version)
        soup = make_soup(html_content)

        count_node = soup.select_one(strategy.select("rating_count"))
        total_ratings = _first_int(count_node.get_text()) if count_node else 0

        histogram = empty_histogram()
        star_nodes = soup.select(strategy.select("rating_star_totals"))
        for index, node in enumerate(star_nodes[:5]):
            histogram[5 - index] = _first_int(node.get_text())

        logger.debug(f"评分解析完成: total={total_ratings}, histogram={histogram}")
        return Ratings(ratings=total_ratings, histogram=histogram)

    @staticmethod
    def parse_screenshots(html_content: str, markup_version: str) -> dict[str, list[str]]:
        """
        从应用详情页提取三类设备的截图

        每个图片位取宽度最大的候选，按最终地址去重并保留首次出现顺序；
        找不到对应容器的设备返回空列表

        Args:
            html_content: 应用详情页 HTML
            markup_version: 页面结构版本

        Returns:
            dict: screenshots / ipad_screenshots / appletv_screenshots -> 地址列表
        """
        strategy = MarkupStrategy.for_version(markup_version)
        soup = make_soup(html_content)
        result: dict[str, list[str]] = {}

        for field_name, device in SCREENSHOT_DEVICES.items():
            urls: list[str] = []
            for source in soup.select(strategy.select("screenshot_sources", device=device)):
                srcset = source.get("srcset")
                if not srcset:
                    continue
                url = extract_screenshot_url(srcset)
                if url and url not in urls:
                    urls.append(url)
            result[field_name] = urls

        logger.debug(
            "截图解析完成: "
            + ", ".join(f"{name}={len(urls)}" for name, urls in result.items())
        )
        return result

    @staticmethod
    def parse_version_history(html_content: str, markup_version: str) -> list[VersionHistory]:
        """
        从应用详情页的版本历史对话框中提取版本记录

        Args:
            html_content: 应用详情页 HTML
            markup_version: 页面结构版本

        Returns:
            list[VersionHistory]: 按页面顺序（最新在前）排列的版本记录
        """
        strategy = MarkupStrategy.for_version(markup_version)
        soup = make_soup(html_content)
        versions = []

        for article in soup.select(strategy.dialog_select("version_article")):
            time_node = article.select_one(strategy.select("version_time"))

            # 多段说明按页面顺序拼接
            release_notes = joined_text(article, strategy.select("version_notes"))
            release_date = time_node.get("datetime") if time_node else None

            versions.append(
                VersionHistory(
                    version_display=joined_text(article, strategy.select("version_label")),
                    release_date=release_date or "",
                    release_notes=release_notes or None,
                )
            )

        logger.debug(f"解析到 {len(versions)} 条版本记录")
        return versions

    @staticmethod
    def parse_privacy(html_content: str, markup_version: str) -> PrivacyDetails:
        """
        从应用详情页的隐私对话框中提取隐私政策链接和数据类型

        没有数据类型的分类直接跳过；未找到的字段保持为 None（导出时省略）

        Args:
            html_content: 应用详情页 HTML
            markup_version: 页面结构版本

        Returns:
            PrivacyDetails: 隐私详情
        """
        strategy = MarkupStrategy.for_version(markup_version)
        soup = make_soup(html_content)

        privacy_policy_url = None
        for link in soup.select(strategy.dialog_select("privacy_link")):
            aria_label = link.get("aria-label") or ""
            # 只看第一个匹配的链接，没有 href 时视为缺失
            if PRIVACY_POLICY_LABEL in aria_label:
                privacy_policy_url = link.get("href")
                break

        privacy_types = []
        for section in soup.select(strategy.dialog_select("privacy_section")):
            purpose_node = section.select_one(strategy.select("privacy_purpose"))
            purpose = purpose_node.get_text().strip() if purpose_node else ""

            for category in section.select(strategy.select("privacy_category")):
                privacy_type = AppStoreParser._parse_privacy_category(category, purpose, strategy)
                if privacy_type:
                    privacy_types.append(privacy_type)

        logger.debug(
            f"隐私解析完成: policy={'yes' if privacy_policy_url else 'no'}, types={len(privacy_types)}"
        )
        return PrivacyDetails(
            privacy_policy_url=privacy_policy_url or None,
            privacy_types=privacy_types or None,
        )

    @staticmethod
    def _parse_privacy_category(
        category: Tag, purpose: str, strategy: MarkupStrategy
    ) -> PrivacyType | None:
        """解析单个隐私分类，没有分类名或数据类型时返回 None"""
        title_node = category.select_one(strategy.select("privacy_category_title"))
        category_name = title_node.get_text().strip() if title_node else ""

        data_types = [
            node.get_text().strip()
            for node in category.select(strategy.select("privacy_data_types"))
        ]

        if not category_name or not data_types:
            return None

        return PrivacyType(
            privacy_type=category_name,
            name=category_name,
            description=f"Used for {purpose}",
            data_categories=data_types,
            purposes=[purpose],
        )
