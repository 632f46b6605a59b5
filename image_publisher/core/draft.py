"""
草稿解析模块
从远程 draft.md 中读取 "Release Date" 行来确定当前期号
"""

import re
from typing import Callable, Optional

import httpx

from .config_manager import DRAFT_URL
from .errors import IssueResolutionError
from ..i18n.i18n import t
from ..utils.logger import debug as log_debug, info as log_info


RELEASE_DATE_PATTERN = re.compile(r'Release Date: (.+)')

Fetcher = Callable[[str], str]


def extract_issue(text: str) -> Optional[str]:
    """
    从草稿文本中提取期号，只取第一个匹配
    :param text: draft.md 的内容
    :return: 期号，找不到时返回None
    """
    match = RELEASE_DATE_PATTERN.search(text or '')
    if not match:
        return None
    issue = match.group(1).strip()
    return issue or None


class DraftIssueResolver:
    """获取草稿并解析期号"""

    def __init__(self, url: str = DRAFT_URL, *, fetcher: Optional[Fetcher] = None,
                 client: Optional[httpx.Client] = None, timeout: float = 10.0):
        self.url = url
        self._timeout = timeout
        self._client = client
        self._fetcher = fetcher or self._default_fetcher

    def _default_fetcher(self, url: str) -> str:
        """Fetch the draft document using ``httpx``."""
        if self._client is not None:
            response = self._client.get(url, timeout=self._timeout)
        else:
            response = httpx.get(url, timeout=self._timeout, follow_redirects=True)
        response.raise_for_status()
        response.encoding = 'utf-8'
        return response.text

    def fetch(self) -> str:
        log_info(t("fetching_draft", url=self.url))
        try:
            return self._fetcher(self.url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise IssueResolutionError(f"Unable to fetch draft from {self.url}: {exc}") from exc

    def resolve(self) -> str:
        """
        下载草稿并返回期号
        :raises IssueResolutionError: 下载失败或没有 Release Date 行
        """
        draft = self.fetch()
        issue = extract_issue(draft)
        if not issue:
            raise IssueResolutionError(f"No 'Release Date:' line found in {self.url}")
        log_debug(f"Resolved issue {issue} from {self.url}")
        return issue
