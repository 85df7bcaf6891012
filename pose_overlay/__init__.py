"""
포즈 추정 오버레이 데모 패키지
"""

from .config import AppConfig, InferenceConfig, ModelConfig, UIConfig, load_config
from .pose_types import BodyPart, HumanPose2D
from .pose_utils import scale_body_part_coords
from .image_processor import BaseImageProcessor, ImageProcessor
from .model_runner import ModelRunner, OpenVINOModelRunner
from .pose_visualizer import PoseVisualizer, Visualizer
from .ui_controller import UIController
from .frame_source import FrameSource, ScreenTransform, Vector3, VideoFrameSource
from .inference_controller import InferenceController

__version__ = "1.0.0"

__all__ = [
    "AppConfig",
    "InferenceConfig",
    "ModelConfig",
    "UIConfig",
    "load_config",
    "BodyPart",
    "HumanPose2D",
    "scale_body_part_coords",
    "BaseImageProcessor",
    "ImageProcessor",
    "ModelRunner",
    "OpenVINOModelRunner",
    "PoseVisualizer",
    "Visualizer",
    "UIController",
    "FrameSource",
    "ScreenTransform",
    "Vector3",
    "VideoFrameSource",
    "InferenceController",
]
