"""
错误类型与尽力而为步骤的结果封装
"""

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx


logger = logging.getLogger(__name__)

T = TypeVar("T")


class AppStoreError(Exception):
    """App Store 客户端错误基类"""


class InputValidationError(AppStoreError, ValueError):
    """必需参数缺失或非法，在发起任何请求前抛出"""


class UpstreamShapeError(AppStoreError):
    """上游 JSON/XML 结构不符合预期"""


class AppNotFoundError(AppStoreError):
    """查询成功但没有匹配的应用"""


class RequestError(AppStoreError):
    """传输层错误（网络异常或 HTTP 错误状态码）"""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        error_type: str = "unknown",
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.error_type = error_type

    @classmethod
    def from_exception(cls, error: Exception, url: str | None = None) -> "RequestError":
        """根据 httpx 异常构建 RequestError"""
        error_info = ErrorAnalyzer.analyze_http_error(error)
        return cls(
            f"Request failed ({error_info['type']}): {error_info['message']}",
            url=url,
            status_code=error_info["status_code"],
            error_type=error_info["type"],
        )


class ErrorAnalyzer:
    """错误分析器"""

    @staticmethod
    def analyze_http_error(error: Exception) -> dict:
        """分析HTTP错误"""
        error_info = {
            "type": "unknown",
            "message": str(error),
            "status_code": None,
            "retry_after": None,
        }

        if isinstance(error, httpx.TimeoutException):
            error_info.update({"type": "timeout"})
        elif isinstance(error, httpx.ConnectError):
            error_info.update({"type": "connection"})
        elif isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code
            error_info["status_code"] = status_code
            if status_code == 429:
                # 尝试解析Retry-After头
                retry_after = error.response.headers.get("Retry-After")
                error_info.update(
                    {
                        "type": "rate_limit",
                        "retry_after": int(retry_after) if retry_after and retry_after.isdigit() else None,
                    }
                )
            elif status_code >= 500:
                error_info.update({"type": "server_error"})
            elif status_code == 404:
                error_info.update({"type": "not_found"})
            else:
                error_info.update({"type": "client_error"})

        return error_info


@dataclass(frozen=True)
class Ok(Generic[T]):
    """步骤成功"""

    value: T


@dataclass(frozen=True)
class Failure:
    """步骤失败（仅在尽力而为的步骤中被丢弃）"""

    step: str
    error: Exception

    @property
    def reason(self) -> str:
        if isinstance(self.error, RequestError):
            return self.error.error_type
        return type(self.error).__name__


Result = Ok[T] | Failure


async def capture(step: str, awaitable: Awaitable[T]) -> "Ok[T] | Failure":
    """
    执行一个步骤并把异常转换为 Failure

    Args:
        step: 步骤名称（用于日志）
        awaitable: 待执行的协程

    Returns:
        Ok 或 Failure
    """
    try:
        return Ok(await awaitable)
    except Exception as e:
        logger.debug(f"Step {step} failed: {e}", exc_info=True)
        return Failure(step=step, error=e)


def describe_failure(failure: Failure) -> dict[str, Any]:
    """把 Failure 整理成便于记录日志的字典"""
    return {
        "step": failure.step,
        "reason": failure.reason,
        "message": str(failure.error),
    }
