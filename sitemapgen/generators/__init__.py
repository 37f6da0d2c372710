"""
文件生成模块
提供sitemap分页生成和文件写入功能
"""

from .file_generator import (
    SitemapFileGenerator,
    GenerationResult,
    resolve_entry_fields,
    DEFAULT_MAX_ENTRIES_PER_SITEMAP,
    DEFAULT_MAX_SITEMAPS_PER_INDEX
)
from .file_writer import LocalFileWriter

__all__ = [
    'SitemapFileGenerator',
    'GenerationResult',
    'resolve_entry_fields',
    'DEFAULT_MAX_ENTRIES_PER_SITEMAP',
    'DEFAULT_MAX_SITEMAPS_PER_INDEX',
    'LocalFileWriter'
]
