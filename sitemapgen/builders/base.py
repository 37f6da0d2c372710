"""
XML文档构建器基类
元素记录在内存中按顺序累积，序列化时一次性生成XML文本
"""

from abc import ABC, abstractmethod
from typing import Any, List
import xml.etree.ElementTree as ET

from .formatting import XML_DECLARATION, schema_attributes


class BaseDocumentBuilder(ABC):
    """文档构建器基类"""

    root_tag = ''
    xsd_name = ''

    def __init__(self):
        """初始化空文档"""
        self._elements: List[Any] = []

    @property
    def is_empty(self) -> bool:
        """文档中是否没有任何子元素"""
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)

    @abstractmethod
    def _render_element(self, parent: ET.Element, element: Any) -> None:
        """将单个元素记录渲染到根节点下"""

    def serialize(self) -> str:
        """
        生成完整XML文本

        Returns:
            str: 带UTF-8声明的XML文档
        """
        root = ET.Element(self.root_tag, schema_attributes(self.xsd_name))
        for element in self._elements:
            self._render_element(root, element)
        return XML_DECLARATION + ET.tostring(root, encoding='unicode')
