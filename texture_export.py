# texture_export.py
import os
import logging

import numpy as np
import pygame

OPAQUE = 255

def to_rgba_array(body) -> np.ndarray:
    """Packs a body's shaded grid into an image-ordered RGBA array.

    The body's grids are indexed [x, y]; images are stored row by row, so the
    result is transposed to [y, x]. Visible cells are opaque, everything else
    fully transparent.

    Args:
        body: A `CelestialBody` (anything exposing `surface.colors` and
            `surface.visible`).

    Returns:
        np.ndarray: (R, R, 4) uint8 array, C-contiguous.
    """
    surface = body.surface
    rgba = np.zeros(surface.colors.shape[:2] + (4,), dtype=np.uint8)
    rgba[..., :3] = np.where(surface.visible[..., np.newaxis], surface.colors, 0)
    rgba[..., 3] = np.where(surface.visible, OPAQUE, 0)
    return np.ascontiguousarray(rgba.transpose(1, 0, 2))

def to_pygame_surface(body) -> pygame.Surface:
    """Builds a per-pixel-alpha `pygame.Surface` of the body's texture.

    No display is needed; callers that blit it to a screen may want
    `convert_alpha()` once a display mode is set.
    """
    raw = to_rgba_array(body)
    rows, cols = raw.shape[:2]
    return pygame.image.frombuffer(raw.tobytes(), (cols, rows), "RGBA")

def save_preview(body, path: str) -> str:
    """Writes the body's texture as an image file (format from the extension).

    Returns:
        str: The path written.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    pygame.image.save(to_pygame_surface(body), path)
    logging.info(f"Saved {body.resolution}x{body.resolution} preview of '{body.name}' to {path}")
    return path
