"""
시스템 실행 및 관리 모듈
"""
import importlib
import logging
import time

import cv2
from IPython import display

from .config import AppConfig
from .frame_source import VideoFrameSource
from .image_processor import ImageProcessor
from .inference_controller import InferenceController
from .model_manager import ModelManager
from .model_runner import OpenVINOModelRunner
from .pose_visualizer import PoseVisualizer
from .ui_controller import UIController

logger = logging.getLogger(__name__)

ESC_KEY = 27
CONFIDENCE_STEP = 0.05


def load_decoder(path):
    """Import a decoder given as "package.module:callable" """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Decoder must look like 'module:callable', got {path!r}")
    module = importlib.import_module(module_name)
    return getattr(module, attr)


class PoseOverlaySystem:
    """포즈 추정 데모 메인 클래스"""

    def __init__(self, config=None, model_runner=None, decoder=None, image_processor=None):
        self.config = config or AppConfig()

        if model_runner is None:
            if decoder is None:
                if not self.config.model.decoder:
                    raise ValueError("A pose decoder is required; set model.decoder in the config")
                decoder = load_decoder(self.config.model.decoder)
            self.model_manager = ModelManager(self.config.model)
            compiled_model = self.model_manager.load_model()
            model_info = self.model_manager.get_model_info()
            logger.info(
                "Model input: %s, outputs: %s", model_info["input_name"], model_info["output_names"]
            )
            model_runner = OpenVINOModelRunner(compiled_model, decoder, self.config.model.output_stride)

        self.image_processor = image_processor or ImageProcessor()
        self.visualizer = PoseVisualizer()
        self.ui_controller = UIController(
            self.config.ui, confidence_threshold=self.config.inference.confidence_threshold
        )
        self.inference_controller = InferenceController(
            image_processor=self.image_processor,
            model_runner=model_runner,
            ui_controller=self.ui_controller,
            visualizer=self.visualizer,
            config=self.config.inference,
        )
        # Slider -> controller wiring
        self.ui_controller.confidence_threshold_slider.add_listener(
            self.inference_controller.update_confidence_threshold
        )
        logger.info("System initialization complete")

    def process_frame(self, frame_source, unscaled_time, unscaled_delta_time):
        """단일 프레임 처리 후 화면에 표시할 이미지 반환"""
        self.inference_controller.frame_source = frame_source
        self.inference_controller.tick()
        self.ui_controller.tick(unscaled_time, unscaled_delta_time)

        frame = frame_source.display_frame()
        frame = self.visualizer.draw(frame)
        frame = self.ui_controller.draw(frame)
        return frame

    def handle_key(self, key):
        """Returns False when the loop should stop"""
        if key == ESC_KEY:
            return False
        if key == ord("m"):
            toggled = not self.inference_controller.use_multi_pose_decoding
            self.inference_controller.update_multipose_toggle(toggled)
            logger.info("Multi-pose decoding: %s", toggled)
        elif key in (ord("+"), ord("=")):
            slider = self.ui_controller.confidence_threshold_slider
            self.ui_controller.update_confidence_threshold(slider.value + CONFIDENCE_STEP)
        elif key == ord("-"):
            slider = self.ui_controller.confidence_threshold_slider
            self.ui_controller.update_confidence_threshold(slider.value - CONFIDENCE_STEP)
        return True

    def run_webcam(self, source=0, flip=False, use_popup=False, skip_first_frames=0):
        """웹캠 또는 비디오 파일로 실시간 포즈 추정 실행"""
        frame_source = None
        title = "Pose Estimation - Press ESC to Exit"
        try:
            frame_source = VideoFrameSource(source, flip=flip, skip_first_frames=skip_first_frames)

            if use_popup:
                cv2.namedWindow(title, cv2.WINDOW_GUI_NORMAL | cv2.WINDOW_AUTOSIZE)

            last_time = time.perf_counter()
            while True:
                if frame_source.read() is None:
                    break

                now = time.perf_counter()
                delta = now - last_time
                last_time = now

                frame = self.process_frame(frame_source, now, delta)

                if use_popup:
                    cv2.imshow(title, frame)
                    key = cv2.waitKey(1) & 0xFF
                    if not self.handle_key(key):
                        break
                else:
                    # Jupyter notebook 출력
                    _, encoded_img = cv2.imencode(".jpg", frame, params=[cv2.IMWRITE_JPEG_QUALITY, 90])
                    i = display.Image(data=encoded_img.tobytes())
                    display.clear_output(wait=True)
                    display.display(i)

        except KeyboardInterrupt:
            logger.info("Interrupted")
        except RuntimeError as e:
            logger.error("%s", e)
        finally:
            if frame_source is not None:
                frame_source.release()
            if use_popup:
                cv2.destroyAllWindows()


def run_pose_overlay(config=None, source=0, flip=True, use_popup=True):
    """Run the pose overlay demo"""
    system = PoseOverlaySystem(config)

    print("=== Pose Estimation Demo ===")
    print("Controls:")
    print("- ESC: Exit")
    print("- M: Toggle multi-pose decoding")
    print("- +/-: Raise/lower confidence threshold")
    print("============================")

    system.run_webcam(source=source, flip=flip, use_popup=use_popup)
