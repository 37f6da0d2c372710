"""
文档构建模块
提供sitemap和sitemap index的XML文档构建功能
"""

from .sitemap_builder import SitemapBuilder, UrlElement
from .sitemap_index_builder import SitemapIndexBuilder, SitemapElement
from .formatting import format_lastmod, format_priority

__all__ = [
    'SitemapBuilder',
    'UrlElement',
    'SitemapIndexBuilder',
    'SitemapElement',
    'format_lastmod',
    'format_priority'
]
