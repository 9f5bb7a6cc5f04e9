"""
Result Aggregator
候选去重、分块, 按块批量获取详情并批量做格式校验
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, TypeVar
import asyncio
import logging

from models import Candidate, PhotoRecord, ValidationRequest, ValidationVerdict
from processing import ExtractedPhoto, FormatValidator, MetadataExtractor
from scrapers import WikimediaCommonsScraper
from storage import MemoryCache, cached_call
from utils.exceptions import ScraperError


logger = logging.getLogger(__name__)

T = TypeVar("T")


def dedupe_candidates(candidates: Sequence[Candidate]) -> List[Candidate]:
    """按 provider id 去重, 保留第一次出现"""
    unique: List[Candidate] = []
    seen = set()
    for candidate in candidates:
        if candidate.id in seen:
            continue
        seen.add(candidate.id)
        unique.append(candidate)
    return unique


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """按固定大小切块, 最后一块可能更小"""
    if size < 1:
        raise ValueError("chunk size must be positive")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


@dataclass
class ChunkOutcome:
    """单个块的处理结果"""
    records: List[PhotoRecord] = field(default_factory=list)
    metadata_rejected: int = 0
    format_rejected: int = 0
    failed: bool = False
    transport_failed: bool = False
    error: Optional[BaseException] = None


@dataclass
class AggregationOutcome:
    """一次尝试的聚合结果"""
    records: List[PhotoRecord]
    candidate_count: int
    unique_count: int
    chunk_count: int
    metadata_rejected: int = 0
    format_rejected: int = 0
    failed_chunks: int = 0
    transport_failed_chunks: int = 0
    last_error: Optional[BaseException] = None

    @property
    def transport_failed(self) -> bool:
        """所有块的详情请求都在传输层失败"""
        return self.chunk_count > 0 and self.transport_failed_chunks == self.chunk_count


class ResultAggregator:
    """
    结果聚合器

    每个块: 一次批量详情请求 -> 逐条元数据提取 -> 一次批量格式校验。
    块之间并发执行, 单个块失败只让该块贡献 0 条结果。
    """

    def __init__(
        self,
        scraper: WikimediaCommonsScraper,
        validator: FormatValidator,
        extractor: Optional[MetadataExtractor] = None,
        cache: Optional[MemoryCache] = None,
        cache_ttl: Optional[float] = None,
        batch_size: Optional[int] = None,
    ):
        self._scraper = scraper
        self._validator = validator
        self._extractor = extractor or MetadataExtractor()
        self._cache = cache or MemoryCache()
        self._cache_ttl = cache_ttl
        self.batch_size = max(1, int(batch_size or scraper.batch_size))

    async def aggregate(
        self,
        candidates: Sequence[Candidate],
        force_refresh: bool = False,
    ) -> AggregationOutcome:
        """
        处理一次尝试的全部候选

        Args:
            candidates: 搜索命中 (可能重复)
            force_refresh: 忽略已缓存的详情和判定

        Returns:
            AggregationOutcome
        """
        unique = dedupe_candidates(candidates)
        chunks = chunk(unique, self.batch_size)

        outcomes: Tuple[ChunkOutcome, ...] = tuple(
            await asyncio.gather(*(self.process_chunk(part, force_refresh) for part in chunks))
        )

        aggregated = AggregationOutcome(
            records=[record for outcome in outcomes for record in outcome.records],
            candidate_count=len(candidates),
            unique_count=len(unique),
            chunk_count=len(chunks),
        )
        for outcome in outcomes:
            aggregated.metadata_rejected += outcome.metadata_rejected
            aggregated.format_rejected += outcome.format_rejected
            if outcome.failed:
                aggregated.failed_chunks += 1
                aggregated.last_error = outcome.error
            if outcome.transport_failed:
                aggregated.transport_failed_chunks += 1

        logger.info(
            f"Aggregated {aggregated.candidate_count} hits -> {aggregated.unique_count} unique "
            f"in {aggregated.chunk_count} chunks: {len(aggregated.records)} valid, "
            f"{aggregated.metadata_rejected} metadata rejects, "
            f"{aggregated.format_rejected} format rejects, {aggregated.failed_chunks} failed chunks"
        )
        return aggregated

    async def process_chunk(
        self,
        candidates: Sequence[Candidate],
        force_refresh: bool = False,
    ) -> ChunkOutcome:
        """处理单个块, 所有异常都在本块内吸收"""
        if not candidates:
            return ChunkOutcome()

        try:
            pages = await self._fetch_details(candidates, force_refresh)
        except ScraperError as e:
            logger.warning(f"Detail fetch failed for chunk of {len(candidates)}: {e}")
            return ChunkOutcome(failed=True, transport_failed=True, error=e)
        except Exception as e:
            logger.error(f"Unexpected detail failure for chunk of {len(candidates)}: {e}")
            return ChunkOutcome(failed=True, error=e)

        photos = self._extractor.extract_many(pages)
        outcome = ChunkOutcome(metadata_rejected=len(candidates) - len(photos))
        if not photos:
            return outcome

        try:
            verdicts = await self._validate(photos, force_refresh)
        except Exception as e:
            # 整批判定失败: 本块不贡献任何照片, 同一次尝试内不重试
            logger.warning(f"Format validation failed for chunk of {len(photos)}, dropping it: {e}")
            outcome.format_rejected = len(photos)
            outcome.failed = True
            outcome.error = e
            return outcome

        if len(verdicts) != len(photos):
            logger.warning(f"Validator returned {len(verdicts)} verdicts for {len(photos)} images")

        for index, photo in enumerate(photos):
            verdict = verdicts[index] if index < len(verdicts) else None
            record = self._to_record(photo, verdict)
            if record is None:
                outcome.format_rejected += 1
            else:
                outcome.records.append(record)
        return outcome

    async def _fetch_details(
        self,
        candidates: Sequence[Candidate],
        force_refresh: bool,
    ) -> Tuple[Dict[str, Any], ...]:
        page_ids = [candidate.id for candidate in candidates]
        key = f"details:{MemoryCache.make_key(*page_ids)}"

        async def _producer():
            return tuple(await self._scraper.get_details_batch(page_ids))

        return await cached_call(self._cache, key, _producer, ttl=self._cache_ttl, force_refresh=force_refresh)

    async def _validate(
        self,
        photos: Sequence[ExtractedPhoto],
        force_refresh: bool,
    ) -> Tuple[ValidationVerdict, ...]:
        requests = [
            ValidationRequest(url=photo.url, mime_hint=photo.mime_hint, metadata_hint=photo.metadata_hint)
            for photo in photos
        ]
        # 不同校验器的判定互不复用
        key = f"verdicts:{type(self._validator).__name__}:{MemoryCache.make_key(*(request.url for request in requests))}"

        async def _producer():
            return tuple(await self._validator.validate_batch(requests))

        return await cached_call(self._cache, key, _producer, ttl=self._cache_ttl, force_refresh=force_refresh)

    @staticmethod
    def _to_record(photo: ExtractedPhoto, verdict: Optional[ValidationVerdict]) -> Optional[PhotoRecord]:
        if verdict is None or not verdict.accepted:
            return None
        try:
            return photo.to_record(verdict)
        except ValueError as e:
            logger.debug(f"Dropped {photo.id}: {e}")
            return None
