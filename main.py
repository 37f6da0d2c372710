#!/usr/bin/env python3
"""
Sitemap生成工具 - 主程序入口
"""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from sitemapgen.config import ConfigLoader, AppConfig, create_default_config
from sitemapgen.entries import UrlEntry
from sitemapgen.generators import SitemapFileGenerator, GenerationResult
from sitemapgen.utils import setup_logging, get_logger, parse_size, TimingLogger


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    解析命令行参数

    Returns:
        argparse.Namespace: 解析后的参数
    """
    parser = argparse.ArgumentParser(
        description='Sitemap生成工具',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例用法:
  python main.py --config config/config.yaml --entries config/entries.yaml
  python main.py --entries urls.txt --root-uri https://example.com/ --output-dir out
  python main.py --create-config
        """
    )

    parser.add_argument(
        '--config',
        default='config/config.yaml',
        help='系统配置文件路径 (默认: config/config.yaml)'
    )

    parser.add_argument(
        '--entries',
        default='config/entries.yaml',
        help='URL条目文件路径，支持 .yaml/.txt (默认: config/entries.yaml)'
    )

    parser.add_argument(
        '--root-uri',
        help='站点根URI，覆盖配置文件和 SITEMAP_ROOT_URI 环境变量'
    )

    parser.add_argument(
        '--output-dir',
        help='输出目录，覆盖配置文件'
    )

    parser.add_argument(
        '--max-entries-per-sitemap',
        type=int,
        help='每个sitemap文件的最大条目数'
    )

    parser.add_argument(
        '--max-sitemaps-per-index',
        type=int,
        help='每个索引文件的最大sitemap数'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='日志级别 (默认: 配置文件或 INFO)'
    )

    parser.add_argument(
        '--log-file',
        help='日志文件路径 (默认: 配置文件或 logs/sitemapgen.log)'
    )

    parser.add_argument(
        '--create-config',
        action='store_true',
        help='创建默认配置文件'
    )

    return parser.parse_args(argv)


def create_config_file(config_path: str) -> None:
    """
    写入默认配置文件，已存在时不覆盖

    Args:
        config_path: 配置文件路径
    """
    path = Path(config_path)
    if path.exists():
        print(f"配置文件已存在: {path}")
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(create_default_config(), f, allow_unicode=True, sort_keys=False)
    print(f"默认配置文件已创建: {path}")


def build_config(args: argparse.Namespace, loader: ConfigLoader) -> AppConfig:
    """
    合并配置文件、环境变量和命令行参数

    命令行参数优先级最高；配置文件未提供根URI时取自 SITEMAP_ROOT_URI。

    Args:
        args: 命令行参数
        loader: 配置加载器

    Returns:
        AppConfig: 最终配置
    """
    if Path(args.config).exists():
        config_data = loader.load_raw_config()
    else:
        config_data = {}

    generator_data = dict(config_data.get('generator') or {})
    logging_data = dict(config_data.get('logging') or {})

    # 配置文件中未解析的占位符视为未配置
    root_uri = generator_data.get('root_uri')
    if not root_uri or str(root_uri).startswith('${'):
        generator_data['root_uri'] = os.getenv('SITEMAP_ROOT_URI', '')

    overrides = {
        'root_uri': args.root_uri,
        'output_dir': args.output_dir,
        'max_entries_per_sitemap': args.max_entries_per_sitemap,
        'max_sitemaps_per_index': args.max_sitemaps_per_index,
    }
    generator_data.update({key: value for key, value in overrides.items() if value is not None})

    if args.log_level:
        logging_data['level'] = args.log_level
    if args.log_file:
        logging_data['file'] = args.log_file

    config_data = dict(config_data, generator=generator_data, logging=logging_data)
    return AppConfig(**config_data)


def run_generation(config: AppConfig, entries: List[UrlEntry]) -> GenerationResult:
    """
    执行生成任务

    Args:
        config: 应用配置
        entries: URL条目列表

    Returns:
        GenerationResult: 生成结果
    """
    logger = get_logger(__name__)
    generator_config = config.generator

    generator = SitemapFileGenerator(
        generator_config.root_uri,
        entries,
        max_entries_per_sitemap=generator_config.max_entries_per_sitemap,
        max_sitemaps_per_index=generator_config.max_sitemaps_per_index
    )

    with TimingLogger(logger, "生成sitemap"):
        result = generator.generate(generator_config.output_dir)

    print("\n生成结果摘要:")
    print("-" * 50)
    print(f"URL条目数量:     {result.total_entries}")
    print(f"sitemap文件数量: {len(result.sitemap_files)}")
    print(f"索引文件数量:    {len(result.index_files)}")
    print("-" * 50)

    return result


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    args = parse_arguments(argv)

    if args.create_config:
        create_config_file(args.config)
        return 0

    loader = ConfigLoader(args.config, args.entries)

    try:
        config = build_config(args, loader)
    except Exception as e:
        print(f"错误: 加载配置失败: {e}")
        return 1

    setup_logging(
        config_file='config/logging.conf',
        log_level=config.logging.level,
        log_file=config.logging.file,
        log_format=config.logging.format,
        max_bytes=parse_size(config.logging.max_size),
        backup_count=config.logging.backup_count
    )

    logger = get_logger(__name__)
    logger.info("程序启动")

    try:
        entries = loader.load_url_entries()
        run_generation(config, entries)
    except KeyboardInterrupt:
        logger.info("程序被用户中断")
        return 1
    except Exception as e:
        logger.error(f"程序执行失败: {e}")
        return 1
    finally:
        logger.info("程序结束")

    return 0


if __name__ == '__main__':
    sys.exit(main())
