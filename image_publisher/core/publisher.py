"""
图片发布模块
把图片复制到图片仓库的期号目录、生成缩放副本、提交并输出 markdown 链接
"""

import shutil
import sys
from pathlib import Path
from typing import Callable, Optional

from .draft import DraftIssueResolver
from .errors import AlreadyExistsError, InvalidArgumentError, IssueResolutionError
from .git_repo import GitRepository
from .models import (
    PublishRequest,
    PublisherSettings,
    StagedFiles,
    build_markdown_link,
    is_valid_issue,
    normalize_width,
)
from .resizer import resize_to_width
from ..i18n.i18n import t
from ..utils.cli_utils import (
    confirm_action,
    print_info,
    print_step,
    print_success,
    print_warning,
    safe_input,
)
from ..utils.logger import info as log_info


def prompt_for_caption() -> str:
    """询问用户是否添加图片说明"""
    if confirm_action(t("caption_missing_prompt")):
        return safe_input(t("caption_input_prompt"), default="")
    return ""


class ImagePublisher:
    """把一张图片发布到某一期的图片目录"""

    def __init__(self, settings: Optional[PublisherSettings] = None, *,
                 issue_resolver: Optional[DraftIssueResolver] = None,
                 caption_prompt: Callable[[], str] = prompt_for_caption,
                 repository_factory: Callable[[Path], GitRepository] = GitRepository,
                 is_interactive: Optional[Callable[[], bool]] = None):
        self.settings = settings or PublisherSettings()
        self.issue_resolver = issue_resolver or DraftIssueResolver(
            self.settings.draft_url, timeout=self.settings.draft_timeout
        )
        self._caption_prompt = caption_prompt
        self._repository_factory = repository_factory
        self._is_interactive = is_interactive or sys.stdin.isatty

    def _validate(self, request: PublishRequest):
        if request.file is None:
            raise InvalidArgumentError("`file` is a required argument")
        if request.image_repo is None:
            raise InvalidArgumentError("`image_repo` is a required argument")

        source = Path(request.file).expanduser()
        if not source.is_file():
            raise InvalidArgumentError(f"`file` does not exist or is not a file: {source}")

        repo = self._repository_factory(Path(request.image_repo).expanduser())
        width = normalize_width(request.width)
        return source, repo, width

    def _resolve_caption(self, caption: Optional[str]) -> str:
        if caption is not None:
            return caption
        if self.settings.non_interactive or not self._is_interactive():
            return ""
        return self._caption_prompt()

    def _resolve_issue(self, issue: Optional[str]) -> str:
        if issue:
            if not is_valid_issue(issue):
                raise InvalidArgumentError(f"`issue` must be a single folder name, got {issue!r}")
            return issue
        print_step(1, t("resolve_issue_step"))
        resolved = self.issue_resolver.resolve()
        if not is_valid_issue(resolved):
            raise IssueResolutionError(
                f"Release Date {resolved!r} from {self.issue_resolver.url} is not a usable folder name"
            )
        print_info(t("issue_resolved", issue=resolved))
        return resolved

    def _ensure_issue_dir(self, repo: GitRepository, issue_dir: Path) -> None:
        if issue_dir.exists():
            return
        print_info(t("creating_issue_folder", path=issue_dir))
        issue_dir.mkdir()
        repo.add(issue_dir.relative_to(repo.path))

    def publish(self, request: PublishRequest) -> str:
        """
        执行完整的发布流程
        :param request: 发布请求
        :return: markdown 链接
        :raises InvalidArgumentError: 缺少参数或 image_repo 不是 git 仓库
        :raises IssueResolutionError: 未指定期号且草稿中找不到
        :raises AlreadyExistsError: 目标文件已存在
        :raises RepositoryError: git 操作失败
        """
        source, repo, width = self._validate(request)
        caption = self._resolve_caption(request.caption)
        issue = self._resolve_issue(request.issue)

        staged = StagedFiles.for_issue(repo.path, issue, source, width)

        print_step(2, t("stage_files_step"))
        self._ensure_issue_dir(repo, staged.issue_dir)

        if staged.original.exists():
            raise AlreadyExistsError(staged.original)
        print_info(t("copying_original", source=source, destination=staged.original))
        shutil.copyfile(source, staged.original)

        if staged.resized.exists():
            raise AlreadyExistsError(staged.resized)

        print_step(3, t("resize_step", width=width))
        print_info(t("resizing_image"))
        new_size = resize_to_width(source, staged.resized, int(width))
        log_info(f"Resized {source.name} to {new_size[0]}x{new_size[1]}")
        print_success(t("resize_done"))

        print_step(4, t("commit_step", issue=issue))
        repo.add(staged.original.relative_to(repo.path))
        repo.add(staged.resized.relative_to(repo.path))
        repo.commit(self.settings.commit_message(issue))
        if request.push:
            print_info(t("pushing_images"))
            repo.push()
        else:
            print_warning(t("push_skipped"))

        link = build_markdown_link(caption, self.settings.base_url, issue, staged.resized.name)
        print_info(t("copy_link_hint"))
        print(link)
        return link
