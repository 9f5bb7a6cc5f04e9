"""
Category Search Profiles
分类过滤对应的 Commons 分类和关键词
"""
from typing import Dict, NamedTuple, Tuple


class CategoryProfile(NamedTuple):
    commons_categories: Tuple[str, ...]
    keywords: Tuple[str, ...]


# 不带分类过滤时使用的通用关键词
GENERAL_KEYWORDS: Tuple[str, ...] = (
    "historical photograph",
    "vintage photograph",
    "old photograph",
    "black and white photograph",
    "archival photograph",
    "historic street scene",
    "photograph 1920s",
    "photograph 1950s",
    "photograph 1970s",
)

# 以 PhotoCategory.value 为键; "all" 没有分类成员搜索
CATEGORY_PROFILES: Dict[str, CategoryProfile] = {
    "all": CategoryProfile(commons_categories=(), keywords=()),
    "architecture": CategoryProfile(
        commons_categories=(
            "Category:Historical images of buildings",
            "Category:Black and white photographs of buildings",
        ),
        keywords=("historic building photograph", "old architecture photograph"),
    ),
    "people": CategoryProfile(
        commons_categories=(
            "Category:Black and white photographs of people",
            "Category:Historical photographs of people",
        ),
        keywords=("historical portrait photograph", "vintage people photograph"),
    ),
    "transport": CategoryProfile(
        commons_categories=(
            "Category:Historical images of transport",
            "Category:Black and white photographs of trains",
        ),
        keywords=("historic tram photograph", "vintage automobile photograph"),
    ),
    "events": CategoryProfile(
        commons_categories=(
            "Category:Photographs of historical events",
            "Category:Black and white photographs of parades",
        ),
        keywords=("historic parade photograph", "historical event photograph"),
    ),
    "landscapes": CategoryProfile(
        commons_categories=(
            "Category:Black and white photographs of landscapes",
            "Category:Historical images of cityscapes",
        ),
        keywords=("historic cityscape photograph", "old landscape photograph"),
    ),
}
