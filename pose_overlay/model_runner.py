"""
모델 실행 모듈
"""
import logging
from abc import ABC, abstractmethod

import numpy as np

logger = logging.getLogger(__name__)


class ModelRunner(ABC):
    """Executes a pose model and decodes its latest output into poses"""

    @abstractmethod
    def crop_input_dims(self, input_dims):
        ...

    @abstractmethod
    def execute_model(self, input_texture):
        ...

    @abstractmethod
    def process_output(self, score_threshold, nms_radius, max_poses, use_multi_pose_decoding):
        ...


class OpenVINOModelRunner(ModelRunner):
    """
    Runs an OpenVINO compiled PoseNet model.

    Decoding is delegated to `decoder`, called as
    decoder(outputs, output_stride, score_threshold, nms_radius, max_poses, use_multi_pose_decoding)
    and expected to return a list of HumanPose2D in input pixel space.
    """

    def __init__(self, compiled_model, decoder, output_stride=32):
        self.compiled_model = compiled_model
        self.decoder = decoder
        self.output_stride = output_stride
        self.last_output = None

    def crop_input_dims(self, input_dims):
        """Trim each side down to a multiple of the output stride"""
        stride = self.output_stride
        return (input_dims[0] - input_dims[0] % stride, input_dims[1] - input_dims[1] % stride)

    def execute_model(self, input_texture):
        # HWC -> NCHW batch of one
        input_img = input_texture.buffer.astype(np.float32).transpose((2, 0, 1))[np.newaxis, ...]
        self.last_output = self.compiled_model([input_img])
        return self.last_output

    def process_output(self, score_threshold, nms_radius, max_poses, use_multi_pose_decoding):
        if self.last_output is None:
            logger.debug("process_output called before execute_model")
            return []
        return list(
            self.decoder(
                self.last_output,
                self.output_stride,
                score_threshold,
                nms_radius,
                max_poses,
                use_multi_pose_decoding,
            )
        )
