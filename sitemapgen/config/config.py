"""
配置加载器
负责加载和验证系统配置及URL条目列表
"""

import yaml
import os
from pathlib import Path
from typing import Dict, List, Any
from dotenv import load_dotenv
import logging

from ..entries import UrlEntry
from .schemas import AppConfig


class ConfigLoader:
    """配置加载器"""

    def __init__(self, config_path: str, entries_path: str):
        """
        初始化配置加载器

        Args:
            config_path: 系统配置文件路径
            entries_path: URL条目文件路径（.yaml/.yml 或 .txt）
        """
        self.config_path = Path(config_path)
        self.entries_path = Path(entries_path)
        self.logger = logging.getLogger(__name__)

        # 加载环境变量
        load_dotenv()

    def load_raw_config(self) -> Dict[str, Any]:
        """
        读取配置文件并替换环境变量，不做模式验证

        Returns:
            Dict[str, Any]: 原始配置数据

        Raises:
            FileNotFoundError: 配置文件不存在
            ValueError: 配置文件为空或格式错误
        """
        try:
            if not self.config_path.exists():
                raise FileNotFoundError(f"配置文件不存在: {self.config_path}")

            with open(self.config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                raise ValueError("配置文件为空")

            # 处理环境变量替换
            return self._substitute_env_vars(config_data)

        except yaml.YAMLError as e:
            raise ValueError(f"YAML配置文件格式错误: {e}")

    def load_system_config(self) -> AppConfig:
        """
        加载系统配置

        Returns:
            AppConfig: 验证后的系统配置

        Raises:
            FileNotFoundError: 配置文件不存在
            ValueError: 配置验证失败
        """
        try:
            app_config = AppConfig(**self.load_raw_config())

            self.logger.info(f"成功加载系统配置: {self.config_path}")
            return app_config

        except Exception as e:
            self.logger.error(f"加载系统配置失败: {e}")
            raise

    def load_url_entries(self) -> List[UrlEntry]:
        """
        加载URL条目列表，保持文件中的顺序

        Returns:
            List[UrlEntry]: URL条目列表

        Raises:
            FileNotFoundError: 条目文件不存在
            ValueError: 条目格式错误
        """
        try:
            if not self.entries_path.exists():
                raise FileNotFoundError(f"条目文件不存在: {self.entries_path}")

            if self.entries_path.suffix.lower() in ('.yaml', '.yml'):
                entries = self._load_yaml_entries()
            else:
                entries = self._load_txt_entries()

            self.logger.info(f"成功加载URL条目: {len(entries)} 个")
            return entries

        except yaml.YAMLError as e:
            raise ValueError(f"YAML条目文件格式错误: {e}")
        except Exception as e:
            self.logger.error(f"加载URL条目失败: {e}")
            raise

    def _load_yaml_entries(self) -> List[UrlEntry]:
        """
        从YAML文件加载条目，entries 列表中的元素可以是映射或URL字符串

        Returns:
            List[UrlEntry]: URL条目列表
        """
        with open(self.entries_path, 'r', encoding='utf-8') as f:
            entries_data = yaml.safe_load(f)

        if not entries_data or 'entries' not in entries_data:
            raise ValueError("条目文件格式错误，缺少'entries'字段")

        entries = []
        for item in entries_data['entries'] or []:
            if isinstance(item, str):
                entries.append(UrlEntry(location=item))
            else:
                entries.append(UrlEntry(**item))
        return entries

    def _load_txt_entries(self) -> List[UrlEntry]:
        """
        从TXT文件加载条目，每行一个URL，忽略空行和 # 注释

        Returns:
            List[UrlEntry]: URL条目列表
        """
        entries = []
        with open(self.entries_path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    entries.append(UrlEntry(location=line))
        return entries

    def _substitute_env_vars(self, data: Any) -> Any:
        """
        递归替换配置中的环境变量

        Args:
            data: 配置数据

        Returns:
            Any: 替换环境变量后的数据
        """
        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]
        elif isinstance(data, str) and data.startswith('${') and data.endswith('}'):
            env_var = data[2:-1]
            env_value = os.getenv(env_var)

            if env_value is None:
                self.logger.warning(f"环境变量未设置: {env_var}")
                return data  # 保持原值

            return self._sanitize_env_value(env_value)
        else:
            return data

    def _sanitize_env_value(self, value: str) -> str:
        """
        清理环境变量值中的换行符和回车符

        Args:
            value: 原始环境变量值

        Returns:
            str: 清理后的值
        """
        if not value:
            return ""

        cleaned = value.strip().replace('\n', '').replace('\r', '').replace('\t', '')

        if cleaned != value.strip():
            self.logger.debug("环境变量值包含控制字符，已自动清理")

        return cleaned


def create_default_config() -> Dict[str, Any]:
    """
    创建默认配置字典

    Returns:
        Dict[str, Any]: 默认配置
    """
    return {
        'generator': {
            'root_uri': '${SITEMAP_ROOT_URI}',  # 从环境变量读取
            'output_dir': 'sitemaps',
            'max_entries_per_sitemap': 50000,
            'max_sitemaps_per_index': 1000
        },
        'logging': {
            'level': 'INFO',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'file': 'logs/sitemapgen.log',
            'max_size': '10MB',
            'backup_count': 5
        }
    }
