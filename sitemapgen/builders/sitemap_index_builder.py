"""
Sitemap索引文档构建器
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
import xml.etree.ElementTree as ET

from ..errors import InvalidArgumentError
from .base import BaseDocumentBuilder
from .formatting import format_lastmod


@dataclass(frozen=True)
class SitemapElement:
    """<sitemap> 元素记录"""
    loc: str
    lastmod: Optional[datetime] = None


class SitemapIndexBuilder(BaseDocumentBuilder):
    """Sitemap索引 (sitemapindex) 构建器"""

    root_tag = 'sitemapindex'
    xsd_name = 'siteindex.xsd'

    def append_sitemap_url(self, loc: str, lastmod: Optional[datetime] = None) -> None:
        """
        追加一个 <sitemap> 元素

        Args:
            loc: sitemap文件的绝对URL
            lastmod: 最后修改时间

        Raises:
            InvalidArgumentError: loc为空
        """
        if loc is None:
            raise InvalidArgumentError('loc不能为空')

        self._elements.append(SitemapElement(loc, lastmod))

    def _render_element(self, parent: ET.Element, element: SitemapElement) -> None:
        sitemap_node = ET.SubElement(parent, 'sitemap')
        ET.SubElement(sitemap_node, 'loc').text = element.loc

        if element.lastmod is not None:
            ET.SubElement(sitemap_node, 'lastmod').text = format_lastmod(element.lastmod)
