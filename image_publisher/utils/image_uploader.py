#!/usr/bin/env python3
"""
Issue Image Uploader Module
Resizes an image, commits the original and the resized copy to the image
repository and prints the markdown link for the issue.
"""

import argparse
from pathlib import Path
from typing import List, Optional, Union

from ..core.config_manager import Config
from ..core.errors import ImagePublisherError
from ..core.git_repo import push as git_push
from ..core.models import PublishRequest, PublisherSettings
from ..core.publisher import ImagePublisher
from ..i18n.i18n import set_locale, t
from . import logger
from .cli_utils import print_error, print_success


def upload_image(file: Union[str, Path, None] = None,
                 caption: Optional[str] = None,
                 width: Union[str, int, None] = None,
                 issue: Optional[str] = None,
                 image_repo: Union[str, Path, None] = None,
                 push: Optional[bool] = None,
                 *,
                 config: Optional[Config] = None,
                 non_interactive: Optional[bool] = None) -> str:
    """
    Upload an issue image to the image repository
    :param file: path to the image to upload
    :param caption: caption for the markdown link; prompted for when missing in an interactive session
    :param width: target width, "600" and "600px" are equivalent (default from config, "600")
    :param issue: issue being edited; inferred from the draft's "Release Date" line when missing
    :param image_repo: local path to the image repository (default from config)
    :param push: push the commit immediately (default from config, True)
    :param config: loaded configuration, read from config.yaml when omitted
    :param non_interactive: never prompt for a caption
    :return: the markdown link, also printed to stdout
    """
    config = config or Config()
    settings = PublisherSettings.from_config(config)
    if non_interactive is not None:
        settings.non_interactive = non_interactive

    request = PublishRequest(
        file=Path(file) if file is not None else None,
        image_repo=Path(image_repo) if image_repo is not None else config.get_repository_path(),
        caption=caption,
        width=width if width is not None else config.get('images.max_width'),
        issue=issue,
        push=push if push is not None else bool(config.get('repository.push', True)),
    )
    return ImagePublisher(settings).publish(request)


def push(image_repo: Union[str, Path, None] = None, *, config: Optional[Config] = None) -> None:
    """Push the image repository without publishing anything"""
    if image_repo is None:
        image_repo = (config or Config()).get_repository_path()
    git_push(image_repo)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-publisher",
        description="Upload issue images to the image repository and print the markdown link",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--config", help="Path to config.yaml")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("--lang", help="Message language (en, zh-CN)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    upload_parser = subparsers.add_parser("upload", help="Resize, commit and link an image")
    upload_parser.add_argument("file", help="Path to the image to upload")
    upload_parser.add_argument("--caption", help="Caption to insert into the markdown link")
    upload_parser.add_argument("--width", help="Width of the resized image, e.g. 600 or 600px")
    upload_parser.add_argument("--issue", help="Issue being edited (inferred from draft.md if omitted)")
    upload_parser.add_argument("--image-repo", help="Local path to the image repository")
    upload_parser.add_argument("--no-push", dest="push", action="store_false", default=None,
                               help="Commit locally without pushing")
    upload_parser.add_argument("--non-interactive", action="store_true", default=None,
                               help="Never prompt for a caption")

    push_parser = subparsers.add_parser("push", help="Push the image repository")
    push_parser.add_argument("--image-repo", help="Local path to the image repository")

    return parser


def _configure(args: argparse.Namespace) -> Config:
    config = Config(args.config) if args.config else Config()
    logger.configure(
        level=args.log_level or config.get('logging.level', 'WARNING'),
        log_file=args.log_file or config.get('logging.file'),
        format_string=config.get('logging.format'),
    )
    set_locale(args.lang or config.get('display.locale', 'en'))
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = _configure(args)
    if not config.validate_config():
        print_error(t("config_invalid", path=config.config_file))
        return 1

    if args.command == "push":
        try:
            push(args.image_repo, config=config)
        except ImagePublisherError as e:
            print_error(t("push_failed", error=e))
            return 1
        print_success(t("push_done", path=args.image_repo or config.get_repository_path()))
        return 0

    try:
        upload_image(
            file=args.file,
            caption=args.caption,
            width=args.width,
            issue=args.issue,
            image_repo=args.image_repo,
            push=args.push,
            config=config,
            non_interactive=args.non_interactive,
        )
    except ImagePublisherError as e:
        print_error(t("publish_failed", error=e))
        return 1
    return 0
