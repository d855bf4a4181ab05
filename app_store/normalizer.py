"""
记录规范化

把已校验的上游条目映射为 App / ListedApp / Review 记录，纯函数，无 I/O
"""

import re

from utils.error_handling import UpstreamShapeError

from .models import App, ListedApp, Review
from .plist import as_list
from .schemas import CatalogEntry, FeedEntry, FeedLabel, FeedLink, ListEntry

SOFTWARE_KIND = "software"
SOFTWARE_KINDS = frozenset({SOFTWARE_KIND, "mac-software"})

_DEVELOPER_ID_RX = re.compile(r"/id(\d+)")


def is_software(entry: CatalogEntry) -> bool:
    """Search 接口结果中只有 kind 为 software（或 mac-software）的条目是应用"""
    return entry.kind in SOFTWARE_KINDS


def is_software_wrapper(entry: CatalogEntry) -> bool:
    """Lookup 接口结果中保留没有 wrapperType 或 wrapperType 为 software 的条目"""
    return entry.wrapper_type is None or entry.wrapper_type == SOFTWARE_KIND


def clean_app(entry: CatalogEntry) -> App:
    """
    把 Search/Lookup 条目映射为 App

    Args:
        entry: 已校验的上游条目

    Returns:
        App: 规范化后的应用记录

    Raises:
        UpstreamShapeError: 条目既没有 trackId 也没有 bundleId
    """
    if entry.track_id is None and entry.bundle_id is None:
        raise UpstreamShapeError("Catalog entry has neither trackId nor bundleId")

    icons = {
        size: url
        for size, url in (
            (60, entry.artwork_url_60),
            (100, entry.artwork_url_100),
            (512, entry.artwork_url_512),
        )
        if url
    }

    return App(
        id=entry.track_id,
        app_id=entry.bundle_id,
        title=entry.track_name,
        url=entry.track_view_url,
        description=entry.description,
        icon=entry.artwork_url_512 or entry.artwork_url_100 or entry.artwork_url_60,
        icons=icons,
        genres=list(entry.genres or []),
        genre_ids=list(entry.genre_ids or []),
        primary_genre=entry.primary_genre_name,
        primary_genre_id=entry.primary_genre_id,
        content_rating=entry.content_advisory_rating,
        languages=list(entry.language_codes or []),
        size=entry.file_size_bytes,
        required_os_version=entry.minimum_os_version,
        released=entry.release_date,
        updated=entry.current_version_release_date or entry.release_date,
        release_notes=entry.release_notes,
        version=entry.version,
        price=entry.price,
        currency=entry.currency,
        free=entry.price == 0,
        developer_id=entry.artist_id,
        developer=entry.artist_name,
        developer_url=entry.artist_view_url,
        developer_website=entry.seller_url,
        score=entry.average_user_rating,
        reviews=entry.user_rating_count,
        current_version_score=entry.average_user_rating_current,
        current_version_reviews=entry.user_rating_count_current,
        screenshots=list(entry.screenshot_urls or []),
        ipad_screenshots=list(entry.ipad_screenshot_urls or []),
        appletv_screenshots=list(entry.appletv_screenshot_urls or []),
        supported_devices=list(entry.supported_devices or []),
    )


def _label(value: FeedLabel | None) -> str | None:
    return value.label if value else None


def clean_review(entry: FeedEntry) -> Review:
    """把评论 RSS 条目映射为 Review"""
    links = as_list(entry.link)
    href = links[0].attributes.href if links and links[0].attributes else None
    rating = _label(entry.rating)

    return Review(
        id=_label(entry.id),
        user_name=_label(entry.author.name) if entry.author else None,
        user_url=_label(entry.author.uri) if entry.author else None,
        version=_label(entry.version),
        score=int(float(rating)) if rating else 0,
        title=_label(entry.title),
        text=_label(entry.content),
        url=href,
        updated=_label(entry.updated),
    )


def _first_href(links: FeedLink | list[FeedLink] | None) -> str | None:
    for link in as_list(links):
        if link.attributes and link.attributes.href:
            return link.attributes.href
    return None


def _to_int(value: str | None) -> int | None:
    return int(value) if value and value.isdigit() else None


def clean_list_entry(entry: ListEntry) -> ListedApp:
    """
    把排行榜 RSS 条目映射为 ListedApp

    图标取最后一张（分辨率最高）；开发者 ID 从开发者链接中解析

    Raises:
        UpstreamShapeError: 条目既没有 im:id 也没有 im:bundleId
    """
    id_attributes = entry.id.attributes if entry.id else None
    track_id = _to_int(id_attributes.im_id) if id_attributes else None
    bundle_id = id_attributes.bundle_id if id_attributes else None
    if track_id is None and bundle_id is None:
        raise UpstreamShapeError("List entry has neither im:id nor im:bundleId")

    images = as_list(entry.image)
    price_attributes = entry.price.attributes if entry.price else None
    price = float(price_attributes.amount) if price_attributes and price_attributes.amount else 0.0

    developer_url = (
        entry.artist.attributes.href if entry.artist and entry.artist.attributes else None
    )
    developer_match = _DEVELOPER_ID_RX.search(developer_url) if developer_url else None
    category_attributes = entry.category.attributes if entry.category else None

    return ListedApp(
        id=track_id,
        app_id=bundle_id,
        title=_label(entry.name),
        icon=images[-1].label if images else None,
        url=_first_href(entry.link),
        price=price,
        currency=price_attributes.currency if price_attributes else None,
        free=price == 0,
        description=_label(entry.summary),
        developer=entry.artist.label if entry.artist else None,
        developer_url=developer_url,
        developer_id=int(developer_match.group(1)) if developer_match else None,
        genre=category_attributes.label if category_attributes else None,
        genre_id=_to_int(category_attributes.im_id) if category_attributes else None,
        released=_label(entry.release_date),
    )
