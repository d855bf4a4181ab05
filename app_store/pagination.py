"""
搜索分页

Search 接口没有 offset 参数，只能指定返回数量，
因此请求 page * num 条结果后在本地切片
"""

from utils.error_handling import InputValidationError

from .normalizer import is_software
from .schemas import CatalogEntry


def validate_page_args(num: int, page: int) -> None:
    """校验分页参数（均需 >= 1）"""
    if num < 1:
        raise InputValidationError(f"num must be >= 1, got {num}")
    if page < 1:
        raise InputValidationError(f"page must be >= 1, got {page}")


def compute_limit(num: int, page: int) -> int:
    """计算需要向上游请求的结果数量"""
    validate_page_args(num, page)
    return page * num


def paginate(entries: list[CatalogEntry], num: int, page: int) -> list[CatalogEntry]:
    """
    过滤非应用条目后切出指定页

    切片窗口在过滤后的结果上计算: [(page - 1) * num, page * num)

    Args:
        entries: 上游返回的全部条目
        num: 每页数量
        page: 页码（从 1 开始）

    Returns:
        list[CatalogEntry]: 当前页条目
    """
    validate_page_args(num, page)
    software = [entry for entry in entries if is_software(entry)]
    start = (page - 1) * num
    return software[start:start + num]


def page_ids(entries: list[CatalogEntry]) -> list[int]:
    """只保留 trackId，缺少 trackId 的条目直接丢弃"""
    return [entry.track_id for entry in entries if entry.track_id is not None]
