"""
日志工具模块
提供统一的日志配置和管理功能
"""

import logging
import logging.config
import logging.handlers
import time
from pathlib import Path
from typing import Optional
import sys

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_MAX_BYTES = 10 * 1024 * 1024


class LoggerManager:
    """日志管理器，整个进程只配置一次"""

    def __init__(self):
        self._configured = False

    def setup_logging(self, config_file: Optional[str] = None,
                      log_level: str = "INFO",
                      log_file: Optional[str] = None,
                      log_format: str = DEFAULT_LOG_FORMAT,
                      max_bytes: int = DEFAULT_MAX_BYTES,
                      backup_count: int = 5) -> None:
        """
        设置日志配置，存在 logging.conf 时优先使用

        Args:
            config_file: 日志配置文件路径
            log_level: 日志级别
            log_file: 日志文件路径，为空时只输出到控制台
            log_format: 日志格式
            max_bytes: 单个日志文件最大字节数
            backup_count: 备份文件数量
        """
        if self._configured:
            return

        if config_file and Path(config_file).exists():
            try:
                logging.config.fileConfig(config_file, disable_existing_loggers=False)
                self._configured = True
                return
            except Exception as e:
                print(f"加载日志配置文件失败: {e}")

        self._configure_handlers(log_level, log_file, log_format, max_bytes, backup_count)
        self._configured = True

    def _configure_handlers(self, log_level: str, log_file: Optional[str], log_format: str,
                            max_bytes: int, backup_count: int) -> None:
        level = getattr(logging, log_level.upper())
        formatter = logging.Formatter(log_format, datefmt='%Y-%m-%d %H:%M:%S')

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        handlers = [logging.StreamHandler(sys.stdout)]

        if log_file:
            try:
                Path(log_file).parent.mkdir(parents=True, exist_ok=True)
                handlers.append(logging.handlers.RotatingFileHandler(
                    log_file,
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding='utf-8'
                ))
            except OSError as e:
                print(f"创建文件日志处理器失败: {e}")

        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)


# 全局日志管理器实例
logger_manager = LoggerManager()


def setup_logging(config_file: Optional[str] = None,
                  log_level: str = "INFO",
                  log_file: Optional[str] = None,
                  log_format: str = DEFAULT_LOG_FORMAT,
                  max_bytes: int = DEFAULT_MAX_BYTES,
                  backup_count: int = 5) -> None:
    """设置日志配置（便捷函数）"""
    logger_manager.setup_logging(config_file, log_level, log_file, log_format,
                                 max_bytes, backup_count)


def get_logger(name: str) -> logging.Logger:
    """获取日志器（便捷函数）"""
    return logging.getLogger(name)


def parse_size(size: str) -> int:
    """
    解析日志文件大小配置

    Args:
        size: 如 10MB、512KB、1024

    Returns:
        int: 字节数
    """
    units = {'KB': 1024, 'MB': 1024 ** 2, 'GB': 1024 ** 3, 'B': 1}
    text = size.strip().upper()
    for unit, factor in units.items():
        if text.endswith(unit):
            return int(float(text[:-len(unit)].strip()) * factor)
    return int(text)


class ProgressLogger:
    """进度日志器"""

    def __init__(self, logger: logging.Logger, total: int,
                 log_interval: int = 100):
        """
        初始化进度日志器

        Args:
            logger: 日志器
            total: 总数量
            log_interval: 日志间隔
        """
        self.logger = logger
        self.total = total
        self.log_interval = max(1, log_interval)
        self.current = 0

    def update(self, count: int = 1) -> None:
        """
        更新进度

        Args:
            count: 增加的数量
        """
        self.current += count

        if self.total <= 0:
            return

        if self.current % self.log_interval == 0 or self.current == self.total:
            percentage = (self.current / self.total) * 100
            if self.current == self.total:
                self.logger.info(f"进度: {percentage:.0f}% ({self.current:,}/{self.total:,})")
            else:
                self.logger.debug(f"进度: {percentage:.1f}% ({self.current:,}/{self.total:,})")


class TimingLogger:
    """计时日志器"""

    def __init__(self, logger: logging.Logger, operation: str):
        """
        初始化计时日志器

        Args:
            logger: 日志器
            operation: 操作名称
        """
        self.logger = logger
        self.operation = operation
        self.start_time = None

    def __enter__(self):
        """进入上下文"""
        self.start_time = time.time()
        self.logger.info(f"开始 {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """退出上下文"""
        if self.start_time:
            duration = time.time() - self.start_time
            if exc_type:
                self.logger.error(f"{self.operation} 失败，耗时: {duration:.2f}秒")
            else:
                self.logger.info(f"{self.operation} 完成，耗时: {duration:.2f}秒")
