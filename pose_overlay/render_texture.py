"""
임시 렌더 텍스처 관리 모듈

Scratch image buffers used within a single frame. Every buffer returned by
get_temporary() must be handed back to release_temporary() in the same tick.
"""
import cv2
import numpy as np

_live_textures = set()


class RenderTexture:
    """Half precision HxWxC image buffer"""

    def __init__(self, width, height, channels=3):
        self.width = int(width)
        self.height = int(height)
        self.channels = channels
        self.buffer = np.zeros((self.height, self.width, channels), dtype=np.float16)
        self.released = False

    @property
    def dims(self):
        return (self.width, self.height)

    def __repr__(self):
        return f"RenderTexture({self.width}x{self.height}x{self.channels})"


def get_temporary(width, height, channels=3):
    texture = RenderTexture(width, height, channels)
    _live_textures.add(texture)
    return texture


def release_temporary(texture):
    if texture.released or texture not in _live_textures:
        raise ValueError(f"{texture!r} was already released")
    _live_textures.discard(texture)
    texture.released = True
    texture.buffer = None


def active_count():
    """Number of temporaries that have not been released yet"""
    return len(_live_textures)


def blit(image, target):
    """이미지를 타겟 크기로 복사"""
    resized = cv2.resize(image, target.dims, interpolation=cv2.INTER_AREA)
    if resized.ndim == 2:
        resized = resized[..., np.newaxis]
    target.buffer[...] = resized[..., :target.channels].astype(np.float16)
    return target
