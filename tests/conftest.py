"""
测试公共夹具
"""

import gzip
import xml.etree.ElementTree as ET

import pytest

NS = {'sm': 'http://www.sitemaps.org/schemas/sitemap/0.9'}


class RecordingWriter:
    """在内存中记录写入内容的文件写入器"""

    def __init__(self):
        self.files = {}
        self.order = []

    def write_file(self, path, content):
        self.files[path] = content
        self.order.append(path)


class FailingWriter:
    """第N次写入时抛出OSError"""

    def __init__(self, fail_on=1):
        self.fail_on = fail_on
        self.calls = 0

    def write_file(self, path, content):
        self.calls += 1
        if self.calls >= self.fail_on:
            raise OSError(f"磁盘已满: {path}")


def read_sitemap_locs(content):
    root = ET.fromstring(gzip.decompress(content))
    return [loc.text for loc in root.findall('sm:url/sm:loc', NS)]


def read_index_locs(content):
    root = ET.fromstring(content)
    return [loc.text for loc in root.findall('sm:sitemap/sm:loc', NS)]


@pytest.fixture
def writer():
    return RecordingWriter()
