#!/usr/bin/env python3
"""
配置管理模块
用于加载和管理图片发布工具的配置
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..utils.cli_utils import print_error
from ..utils.logger import warning as log_warning


DRAFT_URL = 'https://raw.githubusercontent.com/rweekly/rweekly.org/gh-pages/draft.md'
PUBLIC_BASE_URL = 'https://raw.githubusercontent.com/rweekly/image/master'
COMMIT_TEMPLATE = '[auto] images for {issue}'
DEFAULT_WIDTH = '600'


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """把 override 递归合并到 base 的副本上"""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """配置管理类"""

    def __init__(self, config_file: Optional[str] = None):
        """
        初始化配置管理器
        :param config_file: 配置文件路径，如果为None则使用项目根目录下的 config.yaml
        """
        if config_file:
            self.config_file = str(config_file)
        else:
            # config_manager.py is at: project_root/image_publisher/core/config_manager.py
            project_root = Path(__file__).parent.parent.parent
            self.config_file = str(project_root / 'config.yaml')

        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        加载配置文件，文件中的值覆盖默认配置
        :return: 配置字典
        """
        defaults = self._get_default_config()
        if not Path(self.config_file).exists():
            return defaults

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded_config = yaml.safe_load(f)
        except (yaml.YAMLError, IOError) as e:
            log_warning(f"Failed to load config file {self.config_file}: {e}")
            return defaults

        # 文件为空或内容不是映射时使用默认配置
        if not isinstance(loaded_config, dict):
            return defaults
        return _deep_merge(defaults, loaded_config)

    def _get_default_config(self) -> Dict[str, Any]:
        """
        获取默认配置
        :return: 默认配置字典
        """
        return {
            'repository': {
                'path': '',
                'push': True
            },
            'images': {
                'max_width': DEFAULT_WIDTH
            },
            'draft': {
                'url': DRAFT_URL,
                'timeout': 10.0
            },
            'publish': {
                'base_url': PUBLIC_BASE_URL,
                'commit_template': COMMIT_TEMPLATE
            },
            'prompt': {
                'non_interactive': False
            },
            'display': {
                'locale': 'en'
            },
            'logging': {
                'level': 'WARNING',
                'file': '',
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            }
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        获取配置值
        :param key: 配置键，支持点号分隔的多级键
        :param default: 默认值
        :return: 配置值
        """
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def expand_path(self, path: str) -> str:
        """
        展开路径中的用户目录和环境变量
        :param path: 原始路径
        :return: 展开后的路径
        """
        return os.path.expandvars(os.path.expanduser(path))

    def get_repository_path(self) -> Optional[Path]:
        """返回配置的图片仓库路径，未配置时返回None"""
        repo_path = self.get('repository.path')
        if not repo_path:
            return None
        return Path(self.expand_path(str(repo_path)))

    def validate_config(self) -> bool:
        """
        验证配置的有效性
        :return: 配置是否有效
        """
        for key in ('draft.url', 'publish.base_url', 'publish.commit_template'):
            if not self.get(key):
                print_error(f"Config error: {key} must be set")
                return False

        template = str(self.get('publish.commit_template'))
        try:
            rendered = template.format(issue='\0')
        except (KeyError, IndexError, ValueError):
            rendered = ''
        if '\0' not in rendered:
            print_error("Config error: publish.commit_template must contain {issue} and no other fields")
            return False

        repo_path = self.get_repository_path()
        if repo_path is not None and not repo_path.exists():
            print_error(f"Config error: repository.path does not exist: {repo_path}")
            return False

        return True
