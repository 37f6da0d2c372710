"""
Sitemap字段格式化
W3C日期时间格式 (http://www.w3.org/TR/NOTE-datetime): YYYY-MM-DDThh:mm:ssTZD
"""

from datetime import datetime
from typing import Dict

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

SITEMAP_NAMESPACE = 'http://www.sitemaps.org/schemas/sitemap/0.9'
XSI_NAMESPACE = 'http://www.w3.org/2001/XMLSchema-instance'


def schema_attributes(xsd_name: str) -> Dict[str, str]:
    """
    生成根元素的命名空间属性

    Args:
        xsd_name: 模式文件名，如 sitemap.xsd

    Returns:
        Dict[str, str]: 按输出顺序排列的属性
    """
    return {
        'xmlns': SITEMAP_NAMESPACE,
        'xmlns:xsi': XSI_NAMESPACE,
        'xsi:schemaLocation': f'{SITEMAP_NAMESPACE} {SITEMAP_NAMESPACE}/{xsd_name}',
    }


def format_lastmod(value: datetime) -> str:
    """
    格式化lastmod，始终带 ±HH:MM 时区偏移且不含小数秒

    Args:
        value: 时间，无时区信息时按本地时区处理

    Returns:
        str: 如 2024-03-01T10:15:00+03:00
    """
    if value.utcoffset() is None:
        value = value.astimezone()

    # 带秒的偏移（如地方平时）截断到分钟
    offset_seconds = int(value.utcoffset().total_seconds())
    sign = '-' if offset_seconds < 0 else '+'
    hours, minutes = divmod(abs(offset_seconds) // 60, 60)
    local_part = value.replace(tzinfo=None, microsecond=0).isoformat()
    return f'{local_part}{sign}{hours:02d}:{minutes:02d}'


def format_priority(priority: float) -> str:
    """格式化优先级，整数值不带小数部分"""
    value = float(priority)
    if value.is_integer():
        return str(int(value))
    return repr(value)
