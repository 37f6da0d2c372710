"""
文件写入器
将生成的文件内容同步写入本地文件系统
"""

from pathlib import Path
import logging


class LocalFileWriter:
    """本地文件写入器"""

    def __init__(self, create_dirs: bool = True):
        """
        初始化文件写入器

        Args:
            create_dirs: 写入前是否自动创建父目录
        """
        self.create_dirs = create_dirs
        self.logger = logging.getLogger(__name__)

    def write_file(self, path: str, content: bytes) -> None:
        """
        写入文件，失败时异常直接向上抛出

        Args:
            path: 目标文件路径
            content: 文件内容
        """
        file_path = Path(path)
        if self.create_dirs:
            file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, 'wb') as f:
            f.write(content)

        self.logger.debug(f"已写入文件: {file_path} ({len(content):,} 字节)")
