# rc2qt/utils/image_utils.py
from PIL import Image, UnidentifiedImageError
from collections import namedtuple
import os
from typing import List

ImageInfo = namedtuple("ImageInfo", ["format", "width", "height", "mode"])


def inspect_image(filepath: str) -> ImageInfo:
    """
    Reads the header of a bitmap or icon file with Pillow.
    Raises FileNotFoundError, or PIL.UnidentifiedImageError if Pillow does not recognize the data.
    For .ico files holding several images the size is that of the largest one.
    """
    with Image.open(filepath) as img:
        return ImageInfo(img.format, img.width, img.height, img.mode)


def resolve_reference(file_path: str, base_dir: str) -> str:
    """RC file references are relative to the directory of the .rc file."""
    if os.path.isabs(file_path):
        return file_path
    return os.path.normpath(os.path.join(base_dir, file_path))


def check_bitmap_reference(entry, base_dir: str) -> List[str]:
    """
    Checks that the file behind a BITMAP (or ICON) entry exists and is an image,
    and that declared WIDTH/HEIGHT attributes agree with it.
    Returns warning messages; the entry is not modified.
    """
    problems: List[str] = []
    path = resolve_reference(entry.file_path.replace("\\", "/"), base_dir)
    if not os.path.isfile(path):
        problems.append(f"{entry.id}: file '{entry.file_path}' not found")
        return problems
    try:
        info = inspect_image(path)
    except UnidentifiedImageError:
        problems.append(f"{entry.id}: '{entry.file_path}' is not an image Pillow can read")
        return problems
    except OSError as e:
        problems.append(f"{entry.id}: cannot read '{entry.file_path}': {e}")
        return problems

    declared_width = getattr(entry, "width", None)
    declared_height = getattr(entry, "height", None)
    if declared_width is not None and declared_width != info.width:
        problems.append(f"{entry.id}: WIDTH {declared_width} does not match image width {info.width}")
    if declared_height is not None and declared_height != info.height:
        problems.append(f"{entry.id}: HEIGHT {declared_height} does not match image height {info.height}")
    return problems
