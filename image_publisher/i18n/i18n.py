"""
国际化（i18n）模块
提供多语言支持功能
"""

import json
from pathlib import Path

from ..utils.logger import warning as log_warning


TRANSLATIONS_DIR = Path(__file__).parent / 'translations'


class I18n:
    """
    国际化类，提供多语言支持
    """

    def __init__(self, locale='en', fallback_locale='en'):
        """
        初始化国际化类
        :param locale: 当前语言环境
        :param fallback_locale: 后备语言环境
        """
        self.locale = self._normalize_locale(locale)
        self.fallback_locale = self._normalize_locale(fallback_locale)
        self.translations = {}
        self.fallback_translations = {}

        self._load_translations()

    def _normalize_locale(self, locale):
        """
        标准化语言代码，处理常见的映射关系
        :param locale: 原始语言代码
        :return: 标准化后的语言代码
        """
        if not locale:
            return 'en'

        locale_mappings = {
            'en_US': 'en',
            'en_GB': 'en',
            'en-US': 'en',
            'en-GB': 'en',
            'zh_CN': 'zh-CN',
            'zh_CN.UTF-8': 'zh-CN',
            'zh-CN.UTF-8': 'zh-CN',
        }

        return locale_mappings.get(locale, locale)

    def _load_table(self, locale):
        """
        按候选文件名加载翻译表，找不到时返回None
        """
        candidates = [
            f'{locale}.json',
            f'{locale.split("_")[0]}.json',  # 处理 en_US -> en
            f'{locale.split("-")[0]}.json',  # 处理 zh-CN -> zh
        ]
        for file_name in candidates:
            table_file = TRANSLATIONS_DIR / file_name
            if table_file.exists():
                with open(table_file, 'r', encoding='utf-8') as f:
                    return json.load(f)
        return None

    def _load_translations(self):
        """
        加载当前语言和后备语言的翻译文件
        """
        translations = self._load_table(self.locale)
        fallback = self._load_table(self.fallback_locale)

        self.translations = translations or {}
        self.fallback_translations = fallback or {}

        if translations is None:
            log_warning(f"No translation table for {self.locale}, falling back to {self.fallback_locale}")

    def t(self, key, **kwargs):
        """
        获取翻译文本
        :param key: 翻译键
        :param kwargs: 用于格式化的参数
        :return: 翻译后的文本，找不到时返回键本身
        """
        if key in self.translations:
            text = self.translations[key]
        elif key in self.fallback_translations:
            text = self.fallback_translations[key]
        else:
            return key

        if kwargs:
            try:
                text = text.format(**kwargs)
            except KeyError:
                log_warning(f"Failed to format translation for key: {key}")

        return text


# 创建全局实例
i18n_instance = I18n()


def t(key, **kwargs):
    """
    全局翻译函数
    :param key: 翻译键
    :param kwargs: 用于格式化的参数
    :return: 翻译后的文本
    """
    return i18n_instance.t(key, **kwargs)


def set_locale(locale):
    """
    设置语言环境
    :param locale: 语言环境
    """
    global i18n_instance
    i18n_instance = I18n(locale=locale)
