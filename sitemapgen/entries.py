"""
Sitemap条目数据模型
使用Pydantic进行数据验证和类型检查
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, validator


class ChangeFrequency(str, Enum):
    """页面更新频率"""
    ALWAYS = 'always'
    HOURLY = 'hourly'
    DAILY = 'daily'
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'
    YEARLY = 'yearly'
    NEVER = 'never'


class UrlEntry(BaseModel):
    """单个页面条目"""
    location: str = Field(..., description="页面URL")
    last_modified: Optional[datetime] = Field(None, description="最后修改时间")
    change_frequency: ChangeFrequency = Field(ChangeFrequency.ALWAYS, description="更新频率")
    priority: float = Field(0.0, description="优先级，0.0-1.0")

    @validator('last_modified', pre=True)
    def promote_date(cls, v):
        # YAML中的纯日期会被解析为date
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime(v.year, v.month, v.day)
        return v

    @validator('change_frequency', pre=True)
    def normalize_change_frequency(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @validator('priority')
    def validate_priority(cls, v):
        if not 0.0 <= v <= 1.0:
            raise ValueError('优先级必须在0.0-1.0之间')
        return v

    class Config:
        """Pydantic配置"""
        frozen = True
