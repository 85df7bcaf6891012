"""
이미지 전처리 모듈 (크롭, 정규화)
"""
from abc import ABC, abstractmethod

import cv2
import numpy as np

# ResNet50 PoseNet expects RGB pixel values in [0, 255] minus the ImageNet mean
RESNET_MEAN = (123.15, 115.90, 103.06)
RESNET_STD = (1.0, 1.0, 1.0)


class BaseImageProcessor(ABC):
    """Crop and normalize operations the inference pipeline relies on"""

    supports_compute = False

    @abstractmethod
    def calculate_input_dims(self, image_dims, target_dim):
        ...

    @abstractmethod
    def crop_image_compute(self, source, target, offset, size):
        ...

    @abstractmethod
    def process_image_compute(self, target, kernel_name):
        ...

    @abstractmethod
    def crop_image_shader(self, source, target, offset, size):
        ...

    @abstractmethod
    def process_image_shader(self, target):
        ...


class ImageProcessor(BaseImageProcessor):
    """numpy/OpenCV 기반 이미지 전처리 클래스"""

    def __init__(self, mean=RESNET_MEAN, std=RESNET_STD, supports_compute=True):
        self.mean = np.asarray(mean, dtype=np.float32)
        self.std = np.asarray(std, dtype=np.float32)
        self.supports_compute = supports_compute
        self.kernels = {"NormalizeImage": self.normalize}

    def calculate_input_dims(self, image_dims, target_dim):
        """Scale image dims so the smaller side equals target_dim, keeping aspect ratio"""
        target_dim = max(target_dim, 64)
        scale = target_dim / min(image_dims[0], image_dims[1])
        return (int(round(image_dims[0] * scale)), int(round(image_dims[1] * scale)))

    def crop_image_compute(self, source, target, offset, size):
        """픽셀 단위 크롭"""
        x, y = int(offset[0]), int(offset[1])
        w, h = int(size[0]), int(size[1])
        target.buffer[...] = source.buffer[y:y + h, x:x + w]
        return target

    def process_image_compute(self, target, kernel_name):
        kernel = self.kernels.get(kernel_name)
        if kernel is None:
            raise ValueError(f"Unknown image kernel: {kernel_name}")
        return kernel(target)

    def crop_image_shader(self, source, target, offset, size):
        """
        Crop with offset and size given as fractions of the source dims

        Parameters:
            source: RenderTexture at source resolution
            target: RenderTexture receiving the crop
            offset: (x, y) fraction of source width/height
            size: (w, h) fraction of source width/height
        """
        x = int(round(offset[0] * source.width))
        y = int(round(offset[1] * source.height))
        w = int(round(size[0] * source.width))
        h = int(round(size[1] * source.height))

        cropped = source.buffer[y:y + h, x:x + w]
        if cropped.shape[1] != target.width or cropped.shape[0] != target.height:
            # cv2.resize has no float16 support
            cropped = cv2.resize(
                cropped.astype(np.float32), target.dims, interpolation=cv2.INTER_LINEAR
            )
            if cropped.ndim == 2:
                cropped = cropped[..., np.newaxis]
        target.buffer[...] = cropped
        return target

    def process_image_shader(self, target):
        return self.normalize(target)

    def normalize(self, target):
        """BGR -> RGB 변환 후 평균/표준편차 정규화"""
        pixels = target.buffer.astype(np.float32)[..., ::-1]
        target.buffer[...] = (pixels - self.mean) / self.std
        return target

    @staticmethod
    def resize_frame_if_needed(frame, max_dimension=1280):
        """필요시 프레임 크기 조정"""
        scale = max_dimension / max(frame.shape)
        if scale < 1:
            frame = cv2.resize(frame, None, fx=scale, fy=scale, interpolation=cv2.INTER_AREA)
        return frame
