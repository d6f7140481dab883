"""运行配置 - 从环境变量读取命令行工具的日志与显示设置"""

import os
from dataclasses import dataclass

# 默认日志级别
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    color: bool = True


def load_settings() -> Settings:
    """根据环境变量构造 Settings。

    环境变量：
      DDZ_LOG_LEVEL  日志级别（DEBUG/INFO/WARNING/...）
      NO_COLOR       设置任意值即关闭彩色输出
    """
    level = os.getenv("DDZ_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
    color = os.getenv("NO_COLOR") is None
    return Settings(log_level=level, color=color)
