"""
日志模块
提供结构化日志记录功能，与控制台输出配合使用
"""

import logging
import sys
from pathlib import Path

# 日志级别映射
LOG_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name='image_publisher', log_file=None, level='WARNING',
                 format_string=None):
    """
    设置日志记录器
    :param name: 日志记录器名称
    :param log_file: 日志文件路径，如果为None则只输出到控制台
    :param level: 日志级别
    :param format_string: 日志格式字符串
    :return: 配置好的日志记录器
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVELS.get(str(level).upper(), logging.WARNING))

    # 避免重复添加处理器
    if logger.handlers:
        logger.handlers.clear()

    formatter = logging.Formatter(format_string)

    # stdout 只留给 markdown 链接
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_path = Path(log_file).expanduser()
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# 全局日志记录器实例
logger = setup_logger()


def configure(level='WARNING', log_file=None, format_string=None):
    """
    根据配置重新创建全局日志记录器
    :param level: 日志级别字符串
    :param log_file: 日志文件路径
    :param format_string: 日志格式字符串
    """
    global logger
    logger = setup_logger(log_file=log_file or None, level=level,
                          format_string=format_string or None)
    return logger


def debug(message):
    """记录调试信息"""
    logger.debug(message)


def info(message):
    """记录信息"""
    logger.info(message)


def warning(message):
    """记录警告"""
    logger.warning(message)


def error(message):
    """记录错误"""
    logger.error(message)

