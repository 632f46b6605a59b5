"""
集成测试 - 在真实的 git 仓库中发布图片
"""

import pytest
from PIL import Image

from image_publisher.core.config_manager import Config
from image_publisher.core.errors import AlreadyExistsError, RepositoryError
from image_publisher.utils.image_uploader import upload_image

from tests.conftest import run_git


@pytest.fixture
def config(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("prompt:\n  non_interactive: true\n", encoding="utf-8")
    return Config(str(config_file))


class TestPublishToGitRepository:
    """测试发布到本地 git 仓库"""

    def test_commit_without_push(self, git_repo, sample_image, config):
        link = upload_image(file=sample_image, caption="A chart", width="600", issue="2023-W40",
                            image_repo=git_repo, push=False, config=config)

        assert link == "![A chart](https://raw.githubusercontent.com/rweekly/image/master/2023-W40/chart_600.png)"
        message = run_git(git_repo, "log", "-1", "--pretty=%s").stdout.strip()
        assert message == "[auto] images for 2023-W40"
        tracked = sorted(run_git(git_repo, "ls-files").stdout.split())
        assert tracked == ["2023-W40/chart.png", "2023-W40/chart_600.png"]
        assert run_git(git_repo, "status", "--porcelain").stdout.strip() == ""

    def test_commit_and_push(self, git_repo_with_remote, sample_image, config):
        repo, remote = git_repo_with_remote
        upload_image(file=sample_image, caption="", width="400px", issue="2023-W41",
                     image_repo=repo, push=True, config=config)

        branch = run_git(repo, "rev-parse", "--abbrev-ref", "HEAD").stdout.strip()
        remote_files = sorted(run_git(remote, "ls-tree", "-r", "--name-only", branch).stdout.split())
        assert remote_files == ["2023-W41/chart.png", "2023-W41/chart_400.png"]
        with Image.open(repo / "2023-W41" / "chart_400.png") as img:
            assert img.width == 400

    def test_push_failure_after_commit(self, git_repo, sample_image, config):
        with pytest.raises(RepositoryError):
            upload_image(file=sample_image, caption="", issue="2023-W40",
                         image_repo=git_repo, push=True, config=config)
        # 提交已完成，不回滚
        message = run_git(git_repo, "log", "-1", "--pretty=%s").stdout.strip()
        assert message == "[auto] images for 2023-W40"

    def test_second_upload_rejected(self, git_repo, sample_image, config):
        upload_image(file=sample_image, caption="", issue="2023-W40",
                     image_repo=git_repo, push=False, config=config)
        with pytest.raises(AlreadyExistsError):
            upload_image(file=sample_image, caption="", issue="2023-W40",
                         image_repo=git_repo, push=False, config=config)
        commits = run_git(git_repo, "rev-list", "--count", "HEAD").stdout.strip()
        assert commits == "1"

    def test_other_width_in_same_issue(self, git_repo, sample_image, tmp_path, config):
        upload_image(file=sample_image, caption="", issue="2023-W40",
                     image_repo=git_repo, push=False, config=config)

        other = tmp_path / "other" / "photo.jpg"
        other.parent.mkdir()
        Image.new("RGB", (900, 300), (0, 128, 0)).save(other, "JPEG")
        link = upload_image(file=other, caption="Photo", width=300, issue="2023-W40",
                            image_repo=git_repo, push=False, config=config)

        assert link.endswith("/2023-W40/photo_300.jpg)")
        assert run_git(git_repo, "rev-list", "--count", "HEAD").stdout.strip() == "2"

    def test_repository_path_from_config(self, git_repo, sample_image, tmp_path):
        config_file = tmp_path / "repo-config.yaml"
        config_file.write_text(
            f"repository:\n  path: {git_repo}\n  push: false\nprompt:\n  non_interactive: true\n",
            encoding="utf-8",
        )
        link = upload_image(file=sample_image, issue="2023-W42", config=Config(str(config_file)))
        assert link == "![](https://raw.githubusercontent.com/rweekly/image/master/2023-W42/chart_600.png)"
