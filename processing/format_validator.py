"""
Format Validator
图片格式校验协议 + 基于元数据的默认实现
"""
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, runtime_checkable
from urllib.parse import urlparse
import logging

from models import ValidationRequest, ValidationVerdict


logger = logging.getLogger(__name__)


@runtime_checkable
class FormatValidator(Protocol):
    """
    格式校验协作者

    判定是终局的: is_valid 且 detected_format 存在时候选才会成为 PhotoRecord。
    validate_batch 必须按输入顺序返回判定。
    """

    async def validate(
        self,
        url: str,
        mime_hint: Optional[str] = None,
        metadata_hint: Optional[Mapping[str, Any]] = None,
    ) -> ValidationVerdict:
        ...

    async def validate_batch(self, requests: Sequence[ValidationRequest]) -> List[ValidationVerdict]:
        ...


# 格式 -> (MIME 类型, 扩展名)
SUPPORTED_FORMATS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "jpeg": (("image/jpeg", "image/pjpeg"), (".jpg", ".jpeg")),
    "png": (("image/png",), (".png",)),
    "webp": (("image/webp",), (".webp",)),
}

# 格式 -> (MIME 类型, 扩展名, 拒绝原因)
REJECTED_FORMATS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...], str]] = {
    "tiff": (("image/tiff",), (".tif", ".tiff"), "Limited browser support"),
    "svg": (("image/svg+xml",), (".svg",), "Not suitable for photographs"),
    "gif": (("image/gif",), (".gif",), "Avoid animated content"),
    "bmp": (("image/bmp", "image/x-ms-bmp"), (".bmp",), "Large file sizes, limited web optimization"),
}


def _format_for_mime(mime_type: str) -> Optional[str]:
    mime_type = mime_type.split(";")[0].strip().lower()
    for name, (mime_types, _extensions) in SUPPORTED_FORMATS.items():
        if mime_type in mime_types:
            return name
    for name, (mime_types, _extensions, _reason) in REJECTED_FORMATS.items():
        if mime_type in mime_types:
            return name
    return None


def _format_for_url(url: str) -> Optional[str]:
    path = urlparse(url).path.lower()
    for name, (_mime_types, extensions) in SUPPORTED_FORMATS.items():
        if path.endswith(extensions):
            return name
    for name, (_mime_types, extensions, _reason) in REJECTED_FORMATS.items():
        if path.endswith(extensions):
            return name
    return None


def _verdict(format_name: str, mime_type: Optional[str], confidence: float, method: str) -> ValidationVerdict:
    if format_name in SUPPORTED_FORMATS:
        return ValidationVerdict(
            is_valid=True,
            detected_format=format_name,
            detected_mime_type=mime_type or SUPPORTED_FORMATS[format_name][0][0],
            confidence=confidence,
            detection_method=method,
        )
    return ValidationVerdict(
        is_valid=False,
        detected_format=format_name,
        detected_mime_type=mime_type,
        confidence=confidence,
        detection_method=method,
        rejection_reason=REJECTED_FORMATS[format_name][2],
    )


class MetadataFormatValidator:
    """
    默认格式校验器

    只使用提供方给出的 MIME 提示, 其次是 URL 扩展名; 不发起网络请求。
    """

    MIME_CONFIDENCE = 0.9
    EXTENSION_CONFIDENCE = 0.7

    async def validate(
        self,
        url: str,
        mime_hint: Optional[str] = None,
        metadata_hint: Optional[Mapping[str, Any]] = None,
    ) -> ValidationVerdict:
        if not url or not isinstance(url, str):
            return ValidationVerdict(
                is_valid=False,
                confidence=1.0,
                detection_method="input-validation",
                rejection_reason="Invalid URL provided",
            )

        mime_type = mime_hint or (metadata_hint or {}).get("mime_type")
        if mime_type:
            format_name = _format_for_mime(str(mime_type))
            if format_name:
                return _verdict(format_name, str(mime_type), self.MIME_CONFIDENCE, "mime-type")

        format_name = _format_for_url(url)
        if format_name:
            return _verdict(format_name, None, self.EXTENSION_CONFIDENCE, "url-extension")

        return ValidationVerdict(
            is_valid=False,
            detected_mime_type=str(mime_type) if mime_type else None,
            confidence=0.0,
            detection_method="unknown",
            rejection_reason="Unable to determine image format",
        )

    async def validate_batch(self, requests: Sequence[ValidationRequest]) -> List[ValidationVerdict]:
        verdicts = [
            await self.validate(request.url, request.mime_hint, request.metadata_hint)
            for request in requests
        ]
        rejected = sum(1 for verdict in verdicts if not verdict.is_valid)
        if rejected:
            logger.debug(f"Format validation rejected {rejected}/{len(verdicts)} images")
        return verdicts
