"""
Sitemap文件生成器
按条目数量将URL条目分页写入多个sitemap文件，并生成sitemap index文件
"""

import gzip
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence, Tuple
from urllib.parse import urljoin, urlparse
import logging

from ..builders import SitemapBuilder, SitemapIndexBuilder
from ..entries import ChangeFrequency, UrlEntry
from ..errors import InvalidArgumentError
from ..utils.logger import ProgressLogger
from .file_writer import LocalFileWriter

SITEMAP_FILE_TEMPLATE = 'sitemap{0}.xml.gz'
SITEMAP_INDEX_FILE_TEMPLATE = 'sitemapindex{0}.xml'

DEFAULT_MAX_ENTRIES_PER_SITEMAP = 50000
DEFAULT_MAX_SITEMAPS_PER_INDEX = 1000


@dataclass
class GenerationResult:
    """生成结果"""
    total_entries: int = 0
    sitemap_files: List[str] = field(default_factory=list)
    index_files: List[str] = field(default_factory=list)


def _now() -> datetime:
    """当前本地时间（带时区）"""
    return datetime.now().astimezone()


def resolve_entry_fields(entry: UrlEntry) -> Tuple[Optional[datetime], ChangeFrequency, float]:
    """
    计算条目实际输出的 (lastmod, changefreq, priority)

    只有同时存在最后修改时间且优先级大于0时才使用条目自身的优先级，
    其余情况优先级一律输出为1。
    """
    if entry.last_modified is not None and entry.priority > 0:
        return entry.last_modified, entry.change_frequency, entry.priority
    if entry.last_modified is not None:
        return entry.last_modified, entry.change_frequency, 1
    return None, entry.change_frequency, 1


class SitemapFileGenerator:
    """Sitemap文件生成器"""

    def __init__(self, root_uri: str, entries: Sequence[UrlEntry],
                 max_entries_per_sitemap: int = DEFAULT_MAX_ENTRIES_PER_SITEMAP,
                 max_sitemaps_per_index: int = DEFAULT_MAX_SITEMAPS_PER_INDEX,
                 file_writer=None):
        """
        初始化生成器

        Args:
            root_uri: 根URI，用于将sitemap文件名解析为绝对URL
            entries: 有序的URL条目列表
            max_entries_per_sitemap: 每个sitemap文件的最大条目数
            max_sitemaps_per_index: 每个索引文件的最大sitemap数
            file_writer: 文件写入器，需提供 write_file(path, content)

        Raises:
            InvalidArgumentError: 参数不满足前置条件
        """
        if root_uri is None:
            raise InvalidArgumentError('root_uri不能为空')
        if entries is None:
            raise InvalidArgumentError('entries不能为空')

        parsed = urlparse(root_uri)
        if not parsed.scheme or not parsed.netloc:
            raise InvalidArgumentError(f'root_uri必须是绝对URI: {root_uri}')
        if max_entries_per_sitemap < 1:
            raise InvalidArgumentError('每个sitemap的最大条目数必须大于0')
        if max_sitemaps_per_index < 1:
            raise InvalidArgumentError('每个索引的最大sitemap数必须大于0')

        self.root_uri = root_uri
        self.entries = entries
        self.max_entries_per_sitemap = max_entries_per_sitemap
        self.max_sitemaps_per_index = max_sitemaps_per_index
        self.file_writer = file_writer or LocalFileWriter()
        self.logger = logging.getLogger(__name__)

    def generate(self, output_dir: str) -> GenerationResult:
        """
        生成全部sitemap和sitemap index文件

        Args:
            output_dir: 输出目录

        Returns:
            GenerationResult: 已写入的文件列表

        Raises:
            InvalidArgumentError: 输出目录为空
            OSError: 文件写入失败（不重试，已写入的文件保留）
        """
        if output_dir is None:
            raise InvalidArgumentError('output_dir不能为空')

        result = GenerationResult(total_entries=len(self.entries))
        progress = ProgressLogger(self.logger, result.total_entries,
                                  log_interval=self.max_entries_per_sitemap)

        index_builder = SitemapIndexBuilder()
        sitemap_builder = SitemapBuilder()
        sitemap_counter = 0
        index_counter = 0

        self.logger.info(f"开始生成sitemap: {result.total_entries:,} 个条目 -> {output_dir}")

        for i, entry in enumerate(self.entries, start=1):
            lastmod, changefreq, priority = resolve_entry_fields(entry)
            sitemap_builder.append_url(entry.location, lastmod, changefreq, priority)
            progress.update()

            if i % self.max_entries_per_sitemap == 0:
                self._write_sitemap_file(output_dir, sitemap_counter, sitemap_builder,
                                         index_builder, result)
                sitemap_counter += 1

                if sitemap_counter % self.max_sitemaps_per_index == 0:
                    self._write_sitemap_index_file(output_dir, index_counter, index_builder, result)
                    index_builder = SitemapIndexBuilder()
                    index_counter += 1

                sitemap_builder = SitemapBuilder()

        if not sitemap_builder.is_empty:
            self._write_sitemap_file(output_dir, sitemap_counter, sitemap_builder,
                                     index_builder, result)

        if not index_builder.is_empty:
            self._write_sitemap_index_file(output_dir, index_counter, index_builder, result)

        self.logger.info(
            f"sitemap生成完成: {len(result.sitemap_files)} 个sitemap文件, "
            f"{len(result.index_files)} 个索引文件"
        )
        return result

    def _write_sitemap_file(self, output_dir: str, sitemap_counter: int,
                            sitemap_builder: SitemapBuilder,
                            index_builder: SitemapIndexBuilder,
                            result: GenerationResult) -> None:
        """写入gzip压缩的sitemap文件并登记到当前索引"""
        file_name = SITEMAP_FILE_TEMPLATE.format(sitemap_counter + 1)
        path = os.path.join(output_dir, file_name)
        content = gzip.compress(sitemap_builder.serialize().encode('utf-8'))

        self.file_writer.write_file(path, content)
        result.sitemap_files.append(path)
        self.logger.info(f"写入sitemap文件: {path} ({len(sitemap_builder):,} 个URL)")

        index_builder.append_sitemap_url(urljoin(self.root_uri, file_name), _now())

    def _write_sitemap_index_file(self, output_dir: str, index_counter: int,
                                  index_builder: SitemapIndexBuilder,
                                  result: GenerationResult) -> None:
        """写入sitemap index文件"""
        file_name = SITEMAP_INDEX_FILE_TEMPLATE.format(index_counter + 1)
        path = os.path.join(output_dir, file_name)

        self.file_writer.write_file(path, index_builder.serialize().encode('utf-8'))
        result.index_files.append(path)
        self.logger.info(f"写入sitemap索引文件: {path} ({len(index_builder):,} 个sitemap)")
