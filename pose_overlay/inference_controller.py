"""
프레임 단위 추론 파이프라인 모듈

Each tick crops and normalizes the current frame, runs the model, rescales
the decoded poses to screen space and pushes them to the UI and visualizer.
"""
import logging

from . import render_texture
from .config import InferenceConfig
from .pose_utils import scale_body_part_coords

logger = logging.getLogger(__name__)


class InferenceController:
    """Per-frame inference and display driver"""

    def __init__(
        self,
        image_processor=None,
        model_runner=None,
        ui_controller=None,
        visualizer=None,
        frame_source=None,
        config=None,
    ):
        config = config or InferenceConfig()

        # Components
        self.image_processor = image_processor
        self.model_runner = model_runner
        self.ui_controller = ui_controller
        self.visualizer = visualizer
        self.frame_source = frame_source

        # Data processing
        self.target_dim = config.target_dim
        self.use_compute_shaders = config.use_compute_shaders

        # Output processing
        self.score_threshold = config.score_threshold
        self.nms_radius = config.nms_radius
        self.max_poses = config.max_poses
        self.use_multi_pose_decoding = config.use_multi_pose_decoding
        self.confidence_threshold = config.confidence_threshold

        # Runtime state, rewritten every tick
        self.mirror_screen = False
        self.offset = (0, 0)
        self.human_poses = []

    def tick(self):
        """
        Run one inference-and-display cycle.

        Returns the rescaled poses, or None if the frame was skipped.
        """
        if not self.are_components_valid():
            return None

        image = self.frame_source.image
        image_dims = (self.frame_source.width, self.frame_source.height)
        input_dims = self.image_processor.calculate_input_dims(image_dims, self.target_dim)

        source_dims = input_dims
        input_dims = self.model_runner.crop_input_dims(input_dims)
        logger.debug("image %s source %s input %s", image_dims, source_dims, input_dims)

        input_texture = self.prepare_input_texture(input_dims)
        try:
            self.process_input_image(input_texture, image, source_dims, input_dims)
            self.model_runner.execute_model(input_texture)
        finally:
            render_texture.release_temporary(input_texture)

        self.human_poses = self.model_runner.process_output(
            self.score_threshold, self.nms_radius, self.max_poses, self.use_multi_pose_decoding
        )

        self.update_human_poses(input_dims)
        self.ui_controller.update_ui(len(self.human_poses))
        self.visualizer.update_pose_visualizations(self.human_poses, self.confidence_threshold)
        return self.human_poses

    def are_components_valid(self):
        if (
            self.image_processor is None
            or self.model_runner is None
            or self.ui_controller is None
            or self.visualizer is None
            or self.frame_source is None
            or self.frame_source.image is None
        ):
            logger.error(
                "InferenceController requires ImageProcessor, ModelRunner, UIController, "
                "Visualizer and FrameSource components."
            )
            return False
        return True

    def prepare_input_texture(self, input_dims):
        return render_texture.get_temporary(input_dims[0], input_dims[1])

    def process_input_image(self, input_texture, image, source_dims, input_dims):
        # Centered crop, truncated toward zero
        self.offset = (
            int((source_dims[0] - input_dims[0]) / 2),
            int((source_dims[1] - input_dims[1]) / 2),
        )

        source_texture = render_texture.get_temporary(source_dims[0], source_dims[1])
        try:
            render_texture.blit(image, source_texture)

            if self.image_processor.supports_compute and self.use_compute_shaders:
                self.image_processor.crop_image_compute(source_texture, input_texture, self.offset, input_dims)
                self.image_processor.process_image_compute(input_texture, "NormalizeImage")
            else:
                self.process_image_shader(source_texture, input_texture, source_dims, input_dims)
        finally:
            render_texture.release_temporary(source_texture)

    def process_image_shader(self, source_texture, input_texture, source_dims, input_dims):
        """Crop using offset and size as fractions of the source dims"""
        scaled_offset = [self.offset[0] / source_dims[0], self.offset[1] / source_dims[1]]
        scaled_size = [input_dims[0] / source_dims[0], input_dims[1] / source_dims[1]]

        self.image_processor.crop_image_shader(source_texture, input_texture, scaled_offset, scaled_size)
        self.image_processor.process_image_shader(input_texture)

    def update_human_poses(self, input_dims):
        screen_transform = self.frame_source.screen_transform
        self.mirror_screen = screen_transform.local_scale.z == -1
        screen_dims = (screen_transform.local_scale.x, screen_transform.local_scale.y)

        for pose in self.human_poses:
            for body_part in pose.body_parts:
                body_part.coordinates = scale_body_part_coords(
                    body_part.coordinates, input_dims, screen_dims, self.offset, self.mirror_screen
                )

    def update_confidence_threshold(self, value):
        self.confidence_threshold = value

    def update_multipose_toggle(self, use_multi_pose_decoding):
        self.use_multi_pose_decoding = use_multi_pose_decoding
