"""
프레임 입력 모듈 (웹캠 / 비디오 파일)
"""
import logging
from dataclasses import dataclass, field

import cv2

from .image_processor import ImageProcessor

logger = logging.getLogger(__name__)


@dataclass
class Vector3:
    x: float = 1.0
    y: float = 1.0
    z: float = 1.0


@dataclass
class ScreenTransform:
    """
    Display surface placement.

    local_scale.x / local_scale.y are the display dims. A z scale of
    exactly -1 means the display is mirrored horizontally.
    """
    local_scale: Vector3 = field(default_factory=Vector3)

    @property
    def mirrored(self):
        return self.local_scale.z == -1

    @property
    def dims(self):
        return (self.local_scale.x, self.local_scale.y)


class FrameSource:
    """Holds the current frame and the screen it is shown on"""

    def __init__(self, image=None, screen_transform=None):
        self.image = image
        self.screen_transform = screen_transform or ScreenTransform()

    @property
    def width(self):
        return int(self.image.shape[1])

    @property
    def height(self):
        return int(self.image.shape[0])

    def fit_screen_to_image(self, mirrored=False):
        """Size the screen to the current image"""
        scale = self.screen_transform.local_scale
        scale.x = float(self.width)
        scale.y = float(self.height)
        scale.z = -1.0 if mirrored else 1.0

    def display_frame(self):
        """Copy of the current frame as it appears on screen"""
        if self.screen_transform.mirrored:
            return cv2.flip(self.image, 1)
        return self.image.copy()


class VideoFrameSource(FrameSource):
    """cv2.VideoCapture 기반 프레임 소스"""

    def __init__(self, source=0, flip=False, skip_first_frames=0, max_dimension=1280):
        super().__init__()
        self.source = source
        self.flip = flip
        self.max_dimension = max_dimension
        self.cap = cv2.VideoCapture(source)
        if not self.cap.isOpened():
            raise RuntimeError(f"Cannot open video source: {source}")
        if skip_first_frames:
            self.cap.set(cv2.CAP_PROP_POS_FRAMES, skip_first_frames)

    def read(self):
        """Advance to the next frame, or return None when the source ends"""
        ok, frame = self.cap.read()
        if not ok or frame is None:
            logger.info("Source %s ended", self.source)
            return None
        self.image = ImageProcessor.resize_frame_if_needed(frame, self.max_dimension)
        self.fit_screen_to_image(mirrored=self.flip)
        return self.image

    def release(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None
