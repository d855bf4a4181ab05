"""
联想词 plist 解码

把 XML 文本转换为嵌套 dict/list 结构，再从中提取联想词
"""

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from lxml import etree

from utils.error_handling import UpstreamShapeError

from .models import Suggestion
from .schemas import SuggestResponse, validate_suggest_response


logger = logging.getLogger(__name__)

T = TypeVar("T")

CONTAINER_TAGS = frozenset({"plist", "dict", "array"})


def as_list(value: T | Sequence[T] | None) -> list[T]:
    """
    把“单值或列表”的歧义字段统一成列表

    Args:
        value: 单个值、列表或 None

    Returns:
        list: None 返回空列表，单值包装成单元素列表
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def element_to_data(element: etree._Element) -> Any:
    """
    把 XML 元素转换为嵌套结构

    规则：
    - 没有子元素的容器（plist / dict / array）转换为 None
    - 没有子元素的其他元素转换为其文本（无文本时为空字符串）
    - 同名子元素出现一次时为单值，出现多次时为列表
    """
    children = [child for child in element if isinstance(child.tag, str)]
    if not children:
        if element.tag in CONTAINER_TAGS:
            return None
        return (element.text or "").strip()

    data: dict[str, Any] = {}
    for child in children:
        value = element_to_data(child)
        if child.tag in data:
            existing = data[child.tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                data[child.tag] = [existing, value]
        else:
            data[child.tag] = value
    return data


def parse_plist(body: str) -> dict[str, Any]:
    """
    解析 plist XML 文本

    Args:
        body: XML 文本

    Returns:
        dict: 以根元素名为键的嵌套结构，例如 {"plist": {"dict": {...}}}

    Raises:
        UpstreamShapeError: XML 语法错误
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True, recover=False)
    try:
        root = etree.fromstring(body.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as e:
        logger.error(f"联想词响应不是合法 XML: {e}")
        raise UpstreamShapeError(f"Suggest API response is not valid XML: {e}") from e

    return {root.tag: element_to_data(root)}


def decode_suggestions(response: SuggestResponse) -> list[Suggestion]:
    """
    从已校验的 plist 结构中提取联想词

    每个 dict 条目取第一个 string 作为联想词；
    缺少 array、array 为纯字符串或没有 dict 时返回空列表

    Args:
        response: 已校验的联想词响应

    Returns:
        list[Suggestion]: 联想词列表
    """
    root_dict = response.plist.dict_ if response.plist else None
    array_data = root_dict.array if root_dict else None

    if array_data is None or isinstance(array_data, str) or array_data.dict_ is None:
        logger.debug("联想词响应中没有 dict 条目")
        return []

    suggestions = []
    for entry in as_list(array_data.dict_):
        if entry is None:
            continue
        strings = as_list(entry.string)
        term = strings[0] if strings else None
        if term:
            suggestions.append(Suggestion(term=term))

    return suggestions


def decode_suggest_body(body: str) -> list[Suggestion]:
    """解析、校验并解码联想词响应文本"""
    response = validate_suggest_response(parse_plist(body))
    return decode_suggestions(response)
