"""
Image Publisher - publish newsletter images to an issue

Resizes an image, commits the original and the resized copy into the
image repository under the issue's folder, and prints the markdown link
to the published file.
"""

from image_publisher.core.errors import (
    AlreadyExistsError,
    ImagePublisherError,
    InvalidArgumentError,
    IssueResolutionError,
    RepositoryError,
)
from image_publisher.core.models import PublishRequest, PublisherSettings
from image_publisher.core.publisher import ImagePublisher
from image_publisher.utils.image_uploader import push, upload_image

__version__ = "0.1.0"

__all__ = [
    "AlreadyExistsError",
    "ImagePublisherError",
    "InvalidArgumentError",
    "IssueResolutionError",
    "RepositoryError",
    "PublishRequest",
    "PublisherSettings",
    "ImagePublisher",
    "push",
    "upload_image",
]
