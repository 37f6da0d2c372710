"""
Sitemap生成工具
按 sitemaps.org 协议分页生成gzip压缩的sitemap文件和sitemap index文件
"""

from .entries import ChangeFrequency, UrlEntry
from .errors import InvalidArgumentError
from .builders import SitemapBuilder, SitemapIndexBuilder
from .generators import SitemapFileGenerator, GenerationResult, LocalFileWriter

__version__ = '1.0.0'

__all__ = [
    'ChangeFrequency',
    'UrlEntry',
    'InvalidArgumentError',
    'SitemapBuilder',
    'SitemapIndexBuilder',
    'SitemapFileGenerator',
    'GenerationResult',
    'LocalFileWriter'
]
