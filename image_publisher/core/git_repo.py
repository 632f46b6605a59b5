"""
Git 操作模块
通过 git 命令行完成仓库检测、暂存、提交和推送
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from .errors import InvalidArgumentError, RepositoryError
from ..utils.logger import debug as log_debug


PathLike = Union[str, Path]


def _git(args, cwd: Path) -> subprocess.CompletedProcess:
    """运行 git 命令，失败时抛出 RepositoryError"""
    command = ['git', *args]
    log_debug(f"Running {' '.join(command)} in {cwd}")
    try:
        return subprocess.run(command, cwd=cwd, check=True,
                              capture_output=True, text=True)
    except FileNotFoundError as e:
        raise RepositoryError("Git is not installed or not found in PATH") from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or e.stdout or '').strip()
        raise RepositoryError(f"`git {args[0]}` failed in {cwd}: {detail}") from e


def discover_repository(path: Optional[PathLike]) -> Optional[Path]:
    """
    查找包含 path 的 git 仓库
    :param path: 仓库根目录或其子目录
    :return: 仓库工作区根目录，不是仓库时返回None
    """
    if path is None:
        return None
    path = Path(path).expanduser()
    if not path.is_dir():
        return None

    try:
        result = _git(['rev-parse', '--show-toplevel'], cwd=path)
    except RepositoryError as e:
        if isinstance(e.__cause__, FileNotFoundError):
            raise
        return None
    return Path(result.stdout.strip())


class GitRepository:
    """图片仓库的 git 工作区"""

    def __init__(self, path: Optional[PathLike]):
        if path is None:
            raise InvalidArgumentError("`image_repo` is a required argument")
        self.path = Path(path).expanduser()
        self.root = discover_repository(self.path)
        if self.root is None:
            raise InvalidArgumentError(f"Unable to use {self.path} as a git repo")

    def add(self, path: PathLike) -> None:
        """暂存文件或目录，相对路径以 self.path 为基准"""
        _git(['add', '--', str(path)], cwd=self.path)

    def commit(self, message: str) -> None:
        _git(['commit', '-m', message], cwd=self.path)

    def push(self) -> None:
        """推送到当前分支配置的远程仓库"""
        _git(['push'], cwd=self.path)


def push(image_repo: PathLike) -> None:
    """直接执行 git push，不经过发布流程"""
    GitRepository(image_repo).push()
