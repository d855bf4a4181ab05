"""
App Store 模块

只读的 App Store 目录客户端，提供应用详情、搜索、评分、版本历史、
隐私信息、联想词、开发者应用、用户评论和排行榜查询
"""

from utils.error_handling import (
    AppNotFoundError,
    AppStoreError,
    InputValidationError,
    RequestError,
    UpstreamShapeError,
)

from .api import AppStoreWebAPI, store_id
from .constants import CATEGORY, COLLECTION, DEVICE
from .models import (
    App,
    ListedApp,
    PrivacyDetails,
    PrivacyType,
    Ratings,
    Review,
    Suggestion,
    VersionHistory,
)
from .parser import AppStoreParser
from .service import (
    app,
    developer,
    list_apps,
    privacy,
    ratings,
    reviews,
    search,
    suggest,
    version_history,
)

__all__ = [
    "app",
    "search",
    "ratings",
    "version_history",
    "privacy",
    "suggest",
    "developer",
    "reviews",
    "list_apps",
    "store_id",
    "COLLECTION",
    "CATEGORY",
    "DEVICE",
    "AppStoreWebAPI",
    "AppStoreParser",
    "App",
    "ListedApp",
    "Ratings",
    "VersionHistory",
    "PrivacyDetails",
    "PrivacyType",
    "Suggestion",
    "Review",
    "AppStoreError",
    "InputValidationError",
    "UpstreamShapeError",
    "AppNotFoundError",
    "RequestError",
]
