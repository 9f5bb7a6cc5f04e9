"""
Settings Configuration
使用 Pydantic 进行配置验证和管理
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class WikimediaSettings(BaseSettings):
    """Wikimedia Commons API 配置"""
    api_url: str = Field(default="https://commons.wikimedia.org/w/api.php", description="Action API 地址")
    user_agent: str = Field(
        default="HistoricalPhotoAcquisition/1.0 (https://commons.wikimedia.org/wiki/Commons:API)",
        description="User Agent (Wikimedia 要求可识别的 UA)",
    )
    batch_size: int = Field(default=50, description="批量详情接口每次最多的 pageid 数")
    request_timeout: float = Field(default=15.0, description="单次 HTTP 请求超时时间(秒)")
    requests_per_second: float = Field(default=20.0, description="请求速率限制")

    class Config:
        env_prefix = "WIKIMEDIA_"


class AcquisitionSettings(BaseSettings):
    """照片获取流水线配置"""
    min_year: int = Field(default=1900, description="最早可接受年份")
    max_retries: int = Field(default=3, description="最大重试次数 (总尝试数 = max_retries + 1)")
    base_radius: float = Field(default=5000.0, description="初始地理搜索半径(米)")
    radius_multiplier: float = Field(default=1.5, description="每次重试半径放大倍数")
    max_radius: float = Field(default=10000.0, description="geosearch 接口允许的最大半径(米)")
    base_limit: int = Field(default=20, description="每个地点的初始结果数")
    limit_multiplier: float = Field(default=1.5, description="每次重试结果数放大倍数")
    max_limit: int = Field(default=500, description="单次列表接口允许的最大结果数")
    location_cap: int = Field(default=30, description="单次尝试最多搜索的地点数")
    keyword_queries: int = Field(default=2, description="每次尝试的关键词搜索数")
    keyword_offset_window: int = Field(default=200, description="关键词搜索随机偏移窗口")
    attempt_delay: float = Field(default=0.5, description="两次尝试之间的等待(秒)")

    class Config:
        env_prefix = "ACQUISITION_"


class CacheSettings(BaseSettings):
    """缓存配置"""
    ttl: int = Field(default=600, description="API 响应缓存过期时间(秒)")
    photo_ttl: int = Field(default=1800, description="最终照片结果缓存过期时间(秒)")
    max_size: int = Field(default=500, description="最大缓存条目数")
    bucket_seconds: int = Field(default=300, description="结果缓存时间分桶(秒)")

    class Config:
        env_prefix = "CACHE_"


class GeneralSettings(BaseSettings):
    """通用设置"""
    log_level: str = Field(default="INFO", description="日志级别")
    log_file: Optional[str] = Field(default=None, description="日志文件名(可选)")


class Settings(BaseSettings):
    """主配置类 - 聚合所有子配置"""

    # 子配置
    wikimedia: WikimediaSettings = Field(default_factory=WikimediaSettings)
    acquisition: AcquisitionSettings = Field(default_factory=AcquisitionSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    general: GeneralSettings = Field(default_factory=GeneralSettings)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @classmethod
    def load_from_env_file(cls, env_path: Optional[Path] = None) -> "Settings":
        """从指定的 .env 文件加载配置"""
        if env_path is None:
            # 默认查找 config/.env
            env_path = Path(__file__).parent / ".env"

        if env_path.exists():
            from dotenv import load_dotenv
            load_dotenv(env_path)

        return cls(
            wikimedia=WikimediaSettings(),
            acquisition=AcquisitionSettings(),
            cache=CacheSettings(),
            general=GeneralSettings(),
        )


@lru_cache()
def get_settings() -> Settings:
    """获取全局配置单例"""
    return Settings.load_from_env_file()


# 便捷访问
def get_cache_settings() -> CacheSettings:
    return get_settings().cache
