"""
HTTP 客户端工具模块
提供按调用创建的 httpx 客户端和文本请求方法
"""

import logging

import httpx

from utils.config_manager import get_config
from utils.error_handling import RequestError


logger = logging.getLogger(__name__)


def create_custom_client(
    *,
    headers: dict[str, str] | None = None,
    proxy: str | None = None,
    verify: bool = True,
    follow_redirects: bool = True,
    timeout: float | None = None,
) -> httpx.AsyncClient:
    """
    创建自定义配置的 HTTP 客户端

    Args:
        headers: 自定义请求头
        proxy: 代理地址
        verify: 是否验证 SSL 证书
        follow_redirects: 是否自动跟随重定向
        timeout: 超时时间（秒）

    Returns:
        httpx.AsyncClient: 自定义配置的异步 HTTP 客户端
    """
    limits = httpx.Limits(max_keepalive_connections=5, max_connections=10, keepalive_expiry=30.0)

    if timeout:
        timeout_config = httpx.Timeout(timeout)
    else:
        timeout_config = httpx.Timeout(connect=10.0, read=30.0, write=10.0, pool=5.0)

    return httpx.AsyncClient(
        headers=headers,
        proxy=proxy,
        limits=limits,
        timeout=timeout_config,
        follow_redirects=follow_redirects,
        verify=verify,
    )


def merge_headers(*header_sets: dict[str, str] | None) -> dict[str, str]:
    """按顺序合并请求头，后面的覆盖前面的"""
    merged: dict[str, str] = {}
    for headers in header_sets:
        if headers:
            merged.update(headers)
    return merged


async def get_text(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    request_options: dict | None = None,
) -> str:
    """
    发送 GET 请求并返回响应文本

    Args:
        url: 请求地址
        headers: 库自身需要的请求头
        request_options: 调用方透传的传输配置（headers, proxy, timeout, verify）

    Returns:
        str: 响应正文

    Raises:
        RequestError: 网络错误或 HTTP 状态码 >= 400
    """
    config = get_config()
    options = request_options or {}

    client_headers = merge_headers(
        {"User-Agent": config.user_agent}, headers, options.get("headers")
    )

    try:
        async with create_custom_client(
            headers=client_headers,
            proxy=options.get("proxy"),
            verify=options.get("verify", config.verify_ssl),
            timeout=options.get("timeout", config.request_timeout),
        ) as client:
            logger.debug(f"GET {url}")
            response = await client.get(url)
            response.raise_for_status()
            return response.text

    except httpx.HTTPStatusError as e:
        logger.error(f"HTTP 错误 {e.response.status_code}: {url}")
        raise RequestError.from_exception(e, url) from e

    except httpx.RequestError as e:
        logger.error(f"网络请求失败: {url} - {e}")
        raise RequestError.from_exception(e, url) from e
