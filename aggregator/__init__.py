"""
Aggregator Module
结果聚合模块 - 去重、分块、批量详情与批量格式校验
"""
from .result_aggregator import (
    ResultAggregator,
    AggregationOutcome,
    ChunkOutcome,
    dedupe_candidates,
    chunk,
)

__all__ = [
    "ResultAggregator",
    "AggregationOutcome",
    "ChunkOutcome",
    "dedupe_candidates",
    "chunk",
]
