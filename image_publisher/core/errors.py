"""
错误类型定义
Exception hierarchy raised by the publishing workflow
"""


class ImagePublisherError(Exception):
    """图片发布异常基类"""
    pass


class InvalidArgumentError(ImagePublisherError):
    """缺少必需参数，或者 image_repo 不是 git 仓库"""
    pass


class IssueResolutionError(ImagePublisherError):
    """无法从草稿中确定期号"""
    pass


class AlreadyExistsError(ImagePublisherError):
    """目标文件已存在于图片仓库中"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"{path} already exists in repo. Delete that first")


class RepositoryError(ImagePublisherError):
    """git add / commit / push 失败"""
    pass
