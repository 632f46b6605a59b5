#!/usr/bin/env python3
# 图片缩放工具
# 按目标宽度等比例缩放图片

from pathlib import Path
from typing import Tuple, Union

from PIL import Image


def output_format(destination: Union[str, Path], fallback: str) -> str:
    """根据扩展名确定保存格式，无法识别时沿用原图格式"""
    suffix = Path(destination).suffix.lower()
    return Image.registered_extensions().get(suffix, fallback)


def resize_to_width(source: Union[str, Path], destination: Union[str, Path],
                    width: int) -> Tuple[int, int]:
    """
    把图片缩放到指定宽度，高度按比例计算
    :param source: 原图路径
    :param destination: 缩放后图片的保存路径，格式由扩展名决定
    :param width: 目标宽度（像素）
    :return: 缩放后的 (宽, 高)
    """
    with Image.open(source) as img:
        target_format = output_format(destination, img.format)
        # 保持宽高比
        ratio = width / img.width
        new_size = (width, max(1, round(img.height * ratio)))
        resized = img.resize(new_size, Image.Resampling.LANCZOS)

    # JPEG 不支持透明通道，铺白色背景
    if target_format == 'JPEG' and resized.mode not in ('RGB', 'L', 'CMYK'):
        rgba = resized.convert('RGBA')
        background = Image.new('RGB', rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.split()[-1])
        resized = background

    resized.save(destination, format=target_format)
    return new_size
