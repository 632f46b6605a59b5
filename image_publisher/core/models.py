"""
数据模型
一次发布调用中使用的请求、配置和文件路径
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config_manager import (
    COMMIT_TEMPLATE,
    DEFAULT_WIDTH,
    DRAFT_URL,
    PUBLIC_BASE_URL,
    Config,
)
from .errors import InvalidArgumentError


_PX_SUFFIX = re.compile(r'px$', re.IGNORECASE)


def normalize_width(width: Union[str, int, None]) -> str:
    """
    去掉宽度末尾的 px 单位
    :param width: "600"、"600px" 或 600
    :return: 纯数字宽度字符串
    """
    if width is None:
        raise InvalidArgumentError("`width` is a required argument")

    cleaned = _PX_SUFFIX.sub('', str(width).strip()).strip()
    if not cleaned.isdigit() or int(cleaned) <= 0:
        raise InvalidArgumentError(f"`width` must be a positive number of pixels, got {width!r}")
    return str(int(cleaned))


def is_valid_issue(issue: Optional[str]) -> bool:
    """期号必须是单个目录名，不能跳出图片仓库"""
    if not issue or issue in (".", ".."):
        return False
    separators = {"/", os.sep, os.altsep} - {None}
    return not any(sep in issue for sep in separators)


def resized_file_name(source: Path, width: str) -> str:
    """chart.png + 600 -> chart_600.png"""
    source = Path(source)
    return f"{source.stem}_{width}{source.suffix}"


def build_markdown_link(caption: str, base_url: str, issue: str, file_name: str) -> str:
    """生成指向已发布图片的 markdown 链接"""
    return f"![{caption}]({base_url.rstrip('/')}/{issue}/{file_name})"


@dataclass
class PublishRequest:
    """一次图片发布请求"""
    file: Optional[Path]
    image_repo: Optional[Path]
    caption: Optional[str] = None
    width: Optional[Union[str, int]] = DEFAULT_WIDTH
    issue: Optional[str] = None
    push: bool = True


@dataclass
class PublisherSettings:
    """
    发布器配置

    non_interactive 为 True 时不会提示输入图片说明，缺省说明为空字符串。
    """
    draft_url: str = DRAFT_URL
    base_url: str = PUBLIC_BASE_URL
    commit_template: str = COMMIT_TEMPLATE
    non_interactive: bool = False
    draft_timeout: float = 10.0

    @classmethod
    def from_config(cls, config: Config) -> 'PublisherSettings':
        return cls(
            draft_url=config.get('draft.url', DRAFT_URL),
            base_url=config.get('publish.base_url', PUBLIC_BASE_URL),
            commit_template=config.get('publish.commit_template', COMMIT_TEMPLATE),
            non_interactive=bool(config.get('prompt.non_interactive', False)),
            draft_timeout=float(config.get('draft.timeout', 10.0)),
        )

    def commit_message(self, issue: str) -> str:
        return self.commit_template.format(issue=issue)


@dataclass(frozen=True)
class StagedFiles:
    """期号目录下的原图和缩放图路径"""
    issue_dir: Path
    original: Path
    resized: Path

    @classmethod
    def for_issue(cls, image_repo: Path, issue: str, source: Path, width: str) -> 'StagedFiles':
        issue_dir = Path(image_repo) / issue
        source = Path(source)
        return cls(
            issue_dir=issue_dir,
            original=issue_dir / source.name,
            resized=issue_dir / resized_file_name(source, width),
        )
