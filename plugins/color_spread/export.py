"""
Image Export

Turns the finished colour buffer into a Pillow image. The whole buffer is
written, border ring included, so a W x H grid gives a W x H picture.
"""

from PIL import Image


def to_image(grid, scale=1):
    """RGB Pillow image of the grid's colour buffer.

    Args:
        grid: Grid to export
        scale: Integer upscale factor (nearest neighbour keeps hard pixels)
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")
    img = Image.fromarray(grid.colors)
    if scale > 1:
        img = img.resize((grid.width * scale, grid.height * scale), Image.NEAREST)
    return img


def save_image(grid, path, scale=1):
    """Write the grid to ``path`` (format from the extension). Returns the path.

    OSError from Pillow (bad directory, no permission) propagates.
    """
    img = to_image(grid, scale)
    img.save(path)
    return path
