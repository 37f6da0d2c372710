"""
配置数据模型定义
使用Pydantic进行数据验证和类型检查
"""

from pydantic import BaseModel, Field, validator

# sitemaps.org 协议规定的单文件条目上限
PROTOCOL_MAX_ENTRIES = 50000


class GeneratorConfig(BaseModel):
    """Sitemap生成配置"""
    root_uri: str = Field(..., description="站点根URI，用于生成索引中的sitemap绝对地址")
    output_dir: str = Field("sitemaps", description="输出目录")
    max_entries_per_sitemap: int = Field(50000, description="每个sitemap文件的最大条目数")
    max_sitemaps_per_index: int = Field(1000, description="每个索引文件的最大sitemap数")

    @validator('root_uri')
    def validate_root_uri(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError(f'无效的根URI: {v}')
        return v

    @validator('max_entries_per_sitemap')
    def validate_max_entries(cls, v):
        if v < 1 or v > PROTOCOL_MAX_ENTRIES:
            raise ValueError(f'每个sitemap的条目数必须在1-{PROTOCOL_MAX_ENTRIES}之间')
        return v

    @validator('max_sitemaps_per_index')
    def validate_max_sitemaps(cls, v):
        if v < 1 or v > PROTOCOL_MAX_ENTRIES:
            raise ValueError(f'每个索引的sitemap数必须在1-{PROTOCOL_MAX_ENTRIES}之间')
        return v


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="日志格式"
    )
    file: str = Field("logs/sitemapgen.log", description="日志文件路径")
    max_size: str = Field("10MB", description="日志文件最大大小")
    backup_count: int = Field(5, description="备份文件数量")

    @validator('level')
    def validate_level(cls, v):
        allowed_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in allowed_levels:
            raise ValueError(f'日志级别必须是: {", ".join(allowed_levels)}')
        return v.upper()


class AppConfig(BaseModel):
    """应用程序总配置"""
    generator: GeneratorConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    class Config:
        """Pydantic配置"""
        validate_assignment = True
        extra = "forbid"  # 禁止额外字段
