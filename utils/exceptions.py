"""
Custom Exceptions
自定义异常类
"""
from typing import Optional


class PhotoAcquisitionError(Exception):
    """照片获取流水线基础异常类"""

    user_message = "An unexpected error occurred while loading photos. Please try again."

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ScraperError(PhotoAcquisitionError):
    """抓取器错误 (传输层或 HTTP 状态错误)"""

    user_message = "Network connection failed. Please check your internet connection and try again."

    def __init__(self, message: str, source: str = None, **kwargs):
        super().__init__(message, kwargs)
        self.source = source


class InsufficientCandidatesError(PhotoAcquisitionError):
    """
    流水线正常运行, 但校验/过滤后没有任何可用照片

    补救方向: 放宽格式或扩大搜索范围, 而不是检查网络
    """

    user_message = "No suitable photos found. Please try again."

    def __init__(self, requested_count: int, attempts_used: int):
        super().__init__(
            f"No usable photos found for {requested_count} requested",
            {"requested_count": requested_count, "attempts_used": attempts_used},
        )
        self.requested_count = requested_count
        self.attempts_used = attempts_used


class FetchTransportError(PhotoAcquisitionError):
    """最后一次尝试中所有请求都在传输层失败"""

    user_message = ScraperError.user_message

    def __init__(self, attempts_used: int, cause: Optional[BaseException] = None):
        super().__init__(
            "Photo provider unreachable on the final attempt",
            {"attempts_used": attempts_used, "cause": repr(cause) if cause else None},
        )
        self.attempts_used = attempts_used
        self.cause = cause
