"""
Wikimedia Commons Scraper
地理搜索 + 分类成员 + 全文搜索 + 批量 imageinfo 详情
API 文档: https://commons.wikimedia.org/w/api.php
"""
from typing import Any, Dict, List, Optional, Sequence
import asyncio
import logging

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .base import RateLimitedScraper
from config import Settings, get_settings
from models import Candidate, Coordinates
from utils.exceptions import ScraperError


logger = logging.getLogger(__name__)


class WikimediaCommonsScraper(RateLimitedScraper[Candidate]):
    """
    Wikimedia Commons 抓取器

    特性:
    - list=geosearch 按坐标搜索文件页
    - list=categorymembers 按分类列出文件
    - list=search 文件命名空间全文搜索
    - prop=imageinfo 按 pageid 批量获取 url / mime / 元数据
    - 传输错误由 tenacity 重试, 最终失败统一转换为 ScraperError
    """

    FILE_NAMESPACE = 6
    MAX_GEOSEARCH_RADIUS = 10000  # 接口上限 (米)
    MIN_GEOSEARCH_RADIUS = 10
    MAX_LIST_LIMIT = 500
    IMAGEINFO_PROPS = "url|mime|metadata|extmetadata"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = settings or get_settings()
        super().__init__(
            requests_per_second=settings.wikimedia.requests_per_second,
            settings=settings,
        )
        self._wikimedia = settings.wikimedia
        self._session = client
        self._owns_session = client is None
        self._session_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def name(self) -> str:
        return "Wikimedia Commons"

    @property
    def batch_size(self) -> int:
        return max(1, int(self._wikimedia.batch_size))

    def _get_client(self) -> httpx.AsyncClient:
        """获取或创建 HTTP 客户端 (超时作用于单次请求)"""
        loop = asyncio.get_running_loop()
        if self._session is not None and self._owns_session and self._session_loop is not loop:
            # 连接池属于上一个事件循环, 无法复用
            logger.debug(f"[{self.name}] Event loop changed, recreating HTTP client")
            self._session = None
        if self._session is None:
            self._session_loop = loop
            self._session = httpx.AsyncClient(
                headers={
                    "User-Agent": self._wikimedia.user_agent,
                    "Accept": "application/json",
                },
                timeout=httpx.Timeout(self._wikimedia.request_timeout),
            )
        return self._session

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _get(self, params: Dict[str, Any]) -> Dict[str, Any]:
        await self._wait_for_rate_limit()

        response = await self._get_client().get(
            self._wikimedia.api_url,
            params={**params, "format": "json"},
        )
        response.raise_for_status()
        return response.json()

    async def _query(self, params: Dict[str, Any], context: str) -> Dict[str, Any]:
        """执行一次 action=query 请求, 所有失败都转换为 ScraperError"""
        try:
            payload = await self._get({"action": "query", **params})
        except (httpx.HTTPError, ValueError) as e:
            self._log_error(f"{context} failed", e)
            raise ScraperError(f"{context} failed: {e}", source=self.name) from e

        if "error" in payload:
            error = payload["error"]
            message = error.get("info") or error.get("code") or "unknown API error"
            self._log_error(f"{context} rejected", Exception(message))
            raise ScraperError(f"{context} rejected: {message}", source=self.name, code=error.get("code"))

        return payload.get("query") or {}

    @staticmethod
    def _to_candidate(item: Dict[str, Any]) -> Optional[Candidate]:
        page_id = item.get("pageid")
        title = item.get("title")
        if page_id is None or not title:
            return None

        raw_coordinates = None
        lat, lon = item.get("lat"), item.get("lon")
        if lat is not None and lon is not None:
            try:
                raw_coordinates = Coordinates(latitude=float(lat), longitude=float(lon))
            except ValueError:
                raw_coordinates = None

        return Candidate(id=str(page_id), title=str(title), raw_coordinates=raw_coordinates)

    def _to_candidates(self, items: Sequence[Dict[str, Any]]) -> List[Candidate]:
        candidates = []
        for item in items or []:
            candidate = self._to_candidate(item)
            if candidate:
                candidates.append(candidate)
        return candidates

    async def geosearch(
        self,
        latitude: float,
        longitude: float,
        radius: float,
        limit: int,
    ) -> List[Candidate]:
        """
        搜索坐标附近的文件页

        Args:
            latitude: 纬度
            longitude: 经度
            radius: 半径(米), 超过接口上限时截断
            limit: 最大结果数
        """
        radius = int(max(self.MIN_GEOSEARCH_RADIUS, min(radius, self.MAX_GEOSEARCH_RADIUS)))
        limit = max(1, min(int(limit), self.MAX_LIST_LIMIT))

        query = await self._query(
            {
                "list": "geosearch",
                "gscoord": f"{latitude}|{longitude}",
                "gsradius": radius,
                "gslimit": limit,
                "gsnamespace": self.FILE_NAMESPACE,
            },
            context=f"Geosearch at ({latitude}, {longitude})",
        )
        candidates = self._to_candidates(query.get("geosearch", []))
        self._log_search(f"geo:{latitude},{longitude}@{radius}m", len(candidates))
        return candidates

    async def category_members(
        self,
        category: str,
        limit: int,
        start_prefix: Optional[str] = None,
    ) -> List[Candidate]:
        """
        列出分类下的文件

        Args:
            category: 分类标题 (Category:...)
            limit: 最大结果数
            start_prefix: 排序键起始前缀, 用于随机化结果窗口
        """
        params: Dict[str, Any] = {
            "list": "categorymembers",
            "cmtitle": category,
            "cmtype": "file",
            "cmnamespace": self.FILE_NAMESPACE,
            "cmlimit": max(1, min(int(limit), self.MAX_LIST_LIMIT)),
        }
        if start_prefix:
            params["cmstartsortkeyprefix"] = start_prefix

        query = await self._query(params, context=f"Category members of '{category}'")
        candidates = self._to_candidates(query.get("categorymembers", []))
        self._log_search(category, len(candidates))
        return candidates

    async def search(
        self,
        query: str,
        max_results: Optional[int] = None,
        offset: int = 0,
    ) -> List[Candidate]:
        """
        文件命名空间全文搜索

        Args:
            query: 搜索关键词
            max_results: 最大结果数
            offset: 结果偏移
        """
        limit = max(1, min(int(max_results or 20), self.MAX_LIST_LIMIT))
        payload = await self._query(
            {
                "list": "search",
                "srsearch": query,
                "srnamespace": self.FILE_NAMESPACE,
                "srlimit": limit,
                "sroffset": max(0, int(offset)),
            },
            context=f"Keyword search '{query}'",
        )
        candidates = self._to_candidates(payload.get("search", []))
        self._log_search(query, len(candidates))
        return candidates

    async def get_details_batch(self, page_ids: Sequence[str]) -> List[Dict[str, Any]]:
        """
        批量获取文件页 imageinfo

        Args:
            page_ids: pageid 列表, 不超过 batch_size

        Returns:
            原始页面数据, 按请求顺序排列; 不存在的页面被跳过
        """
        if not page_ids:
            return []
        if len(page_ids) > self.batch_size:
            raise ValueError(f"At most {self.batch_size} page ids per detail request, got {len(page_ids)}")

        query = await self._query(
            {
                "pageids": "|".join(str(page_id) for page_id in page_ids),
                "prop": "imageinfo",
                "iiprop": self.IMAGEINFO_PROPS,
            },
            context=f"Detail batch of {len(page_ids)}",
        )
        pages = query.get("pages") or {}
        if isinstance(pages, list):
            pages = {str(page.get("pageid")): page for page in pages}

        ordered = []
        for page_id in page_ids:
            page = pages.get(str(page_id))
            if not page or "missing" in page or "invalid" in page:
                continue
            ordered.append(page)
        return ordered
