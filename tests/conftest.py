import numpy as np
import pytest

from pose_overlay import render_texture
from pose_overlay.frame_source import FrameSource, ScreenTransform, Vector3
from pose_overlay.image_processor import ImageProcessor
from pose_overlay.model_runner import ModelRunner
from pose_overlay.pose_types import BodyPart, HumanPose2D
from pose_overlay.pose_visualizer import Visualizer
from pose_overlay.ui_controller import UIController


class FakeModelRunner(ModelRunner):
    """Returns a fresh copy of `poses` on every process_output call"""

    def __init__(self, poses=None, output_stride=32):
        self.poses = poses or []
        self.output_stride = output_stride
        self.executed = []
        self.process_calls = []

    def crop_input_dims(self, input_dims):
        stride = self.output_stride
        return (input_dims[0] - input_dims[0] % stride, input_dims[1] - input_dims[1] % stride)

    def execute_model(self, input_texture):
        self.executed.append((input_texture.dims, input_texture.buffer.copy()))

    def process_output(self, score_threshold, nms_radius, max_poses, use_multi_pose_decoding):
        self.process_calls.append((score_threshold, nms_radius, max_poses, use_multi_pose_decoding))
        return [
            HumanPose2D(
                pose.index,
                [BodyPart(p.index, tuple(p.coordinates), p.prob) for p in pose.body_parts],
            )
            for pose in self.poses
        ]


class RecordingVisualizer(Visualizer):
    def __init__(self):
        self.calls = []

    def update_pose_visualizations(self, poses, confidence_threshold):
        self.calls.append((poses, confidence_threshold))


class RecordingImageProcessor(ImageProcessor):
    def __init__(self, supports_compute=True):
        super().__init__(supports_compute=supports_compute)
        self.calls = []

    def crop_image_compute(self, source, target, offset, size):
        self.calls.append(("crop_compute", tuple(offset), tuple(size)))
        return super().crop_image_compute(source, target, offset, size)

    def process_image_compute(self, target, kernel_name):
        self.calls.append(("process_compute", kernel_name))
        return super().process_image_compute(target, kernel_name)

    def crop_image_shader(self, source, target, offset, size):
        self.calls.append(("crop_shader", list(offset), list(size)))
        return super().crop_image_shader(source, target, offset, size)

    def process_image_shader(self, target):
        self.calls.append(("process_shader",))
        return super().process_image_shader(target)


class RecordingUIController(UIController):
    def __init__(self):
        super().__init__()
        self.counts = []

    def update_ui(self, pose_count):
        self.counts.append(pose_count)
        super().update_ui(pose_count)


@pytest.fixture(autouse=True)
def no_leaked_textures():
    before = render_texture.active_count()
    yield
    assert render_texture.active_count() == before


@pytest.fixture
def frame_source():
    rng = np.random.default_rng(0)
    image = rng.integers(0, 256, size=(480, 640, 3), dtype=np.uint8)
    return FrameSource(image, ScreenTransform(Vector3(640.0, 480.0, 1.0)))


@pytest.fixture
def single_pose():
    return HumanPose2D(0, [BodyPart(0, (10.0, 20.0), 0.9), BodyPart(5, (100.0, 50.0), 0.3)])
