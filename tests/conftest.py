"""
测试公共夹具
"""

import shutil
import subprocess
import sys
from pathlib import Path

import pytest
from PIL import Image

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def run_git(cwd, *args):
    """在测试仓库中运行 git 命令"""
    return subprocess.run(['git', *args], cwd=cwd, check=True,
                          capture_output=True, text=True)


def init_repo(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    run_git(path, 'init')
    run_git(path, 'config', 'user.email', 'images@example.com')
    run_git(path, 'config', 'user.name', 'Image Bot')
    run_git(path, 'config', 'commit.gpgsign', 'false')
    return path


requires_git = pytest.mark.skipif(shutil.which('git') is None, reason="git is not installed")


@pytest.fixture
def git_repo(tmp_path):
    """空的图片仓库"""
    if shutil.which('git') is None:
        pytest.skip("git is not installed")
    return init_repo(tmp_path / 'image')


@pytest.fixture
def git_repo_with_remote(tmp_path):
    """带有 origin 远程裸仓库的图片仓库"""
    if shutil.which('git') is None:
        pytest.skip("git is not installed")
    remote = tmp_path / 'remote.git'
    remote.mkdir()
    run_git(remote, 'init', '--bare')

    repo = init_repo(tmp_path / 'image')
    run_git(repo, 'remote', 'add', 'origin', str(remote))
    run_git(repo, 'config', 'push.default', 'current')
    return repo, remote


@pytest.fixture
def sample_image(tmp_path):
    """1200x800 的 PNG 图片"""
    source_dir = tmp_path / 'source'
    source_dir.mkdir()
    path = source_dir / 'chart.png'
    Image.new('RGB', (1200, 800), (200, 30, 30)).save(path)
    return path
