"""
Sitemap文档构建器
生成符合 sitemaps.org 协议的 urlset 文档
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union
import xml.etree.ElementTree as ET

from ..entries import ChangeFrequency
from ..errors import InvalidArgumentError
from .base import BaseDocumentBuilder
from .formatting import format_lastmod, format_priority


@dataclass(frozen=True)
class UrlElement:
    """<url> 元素记录"""
    loc: str
    lastmod: Optional[datetime] = None
    changefreq: Optional[ChangeFrequency] = None
    priority: Optional[float] = None


class SitemapBuilder(BaseDocumentBuilder):
    """Sitemap (urlset) 构建器"""

    root_tag = 'urlset'
    xsd_name = 'sitemap.xsd'

    def append_url(self, loc: str,
                   lastmod: Optional[datetime] = None,
                   changefreq: Optional[Union[ChangeFrequency, str]] = None,
                   priority: Optional[float] = None) -> None:
        """
        追加一个 <url> 元素

        子元素输出顺序固定为 loc, lastmod, changefreq, priority，
        未提供的可选字段不输出。

        Args:
            loc: 页面URL
            lastmod: 最后修改时间
            changefreq: 更新频率
            priority: 优先级

        Raises:
            InvalidArgumentError: loc为空或changefreq无效
        """
        if loc is None:
            raise InvalidArgumentError('loc不能为空')

        if changefreq is not None:
            try:
                changefreq = ChangeFrequency(changefreq)
            except ValueError:
                raise InvalidArgumentError(f'无效的更新频率: {changefreq}')

        self._elements.append(UrlElement(loc, lastmod, changefreq, priority))

    def _render_element(self, parent: ET.Element, element: UrlElement) -> None:
        url_node = ET.SubElement(parent, 'url')
        ET.SubElement(url_node, 'loc').text = element.loc

        if element.lastmod is not None:
            ET.SubElement(url_node, 'lastmod').text = format_lastmod(element.lastmod)
        if element.changefreq is not None:
            ET.SubElement(url_node, 'changefreq').text = element.changefreq.value
        if element.priority is not None:
            ET.SubElement(url_node, 'priority').text = format_priority(element.priority)
