import sys

from loguru import logger

from acmatch.core.config import settings


# ========================================
# Loguru 日志配置
# ========================================
def setup_logger(level: str | None = None, log_file: str | None = None) -> None:
    """配置 loguru 日志系统

    未传入的参数回落到 settings.LOG_LEVEL / settings.LOG_FILE。
    """
    level = level or settings.LOG_LEVEL
    log_file = settings.LOG_FILE if log_file is None else log_file

    # 移除默认的 handler
    logger.remove()

    # 添加控制台输出（彩色）
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )

    # 如果配置了日志文件，添加文件输出
    if log_file:
        logger.add(
            log_file,
            rotation="100 MB",  # 日志文件达到 100MB 时轮转
            retention="10 days",  # 保留最近 10 天的日志
            compression="zip",  # 压缩旧日志
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=level,
        )

    logger.debug(f"acmatch 日志系统初始化完成 (level={level})")
