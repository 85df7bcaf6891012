"""
화면 텍스트(검출된 자세 수, FPS) 및 신뢰도 슬라이더 관리 모듈
"""
import cv2

from .config import UIConfig


class TextField:
    """On-screen text surface"""

    def __init__(self, position, font_scale=0.8, thickness=2):
        self.position = position
        self.font_scale = font_scale
        self.thickness = thickness
        self.text = ""
        self.color = (0, 0, 0)
        self.active = False

    def draw(self, img):
        if not self.active or not self.text:
            return img
        cv2.putText(
            img,
            self.text,
            self.position,
            cv2.FONT_HERSHEY_SIMPLEX,
            self.font_scale,
            self.color,
            self.thickness,
            cv2.LINE_AA,
        )
        return img


class Slider:
    """Value in [min_value, max_value] with change listeners"""

    def __init__(self, value=0.5, min_value=0.0, max_value=1.0):
        self.min_value = min_value
        self.max_value = max_value
        self.value = min(max(value, min_value), max_value)
        self.listeners = []

    def add_listener(self, callback):
        self.listeners.append(callback)

    def set_value(self, value):
        self.value = min(max(value, self.min_value), self.max_value)
        for callback in self.listeners:
            callback(self.value)
        return self.value


class UIController:
    """검출된 자세 수와 FPS 텍스트를 갱신하는 클래스"""

    def __init__(self, config=None, confidence_threshold=0.5):
        config = config or UIConfig()
        self.text_color = config.text_color
        self.display_pose_count = config.display_pose_count
        self.display_fps = config.display_fps
        self.fps_refresh_rate = config.fps_refresh_rate

        self.poses_detected_text = TextField((10, 30))
        self.fps_text = TextField((10, 60))
        self.confidence_threshold_slider = Slider(confidence_threshold)

        self.fps_timer = 0.0

    def tick(self, unscaled_time, unscaled_delta_time):
        """Called once per displayed frame"""
        if self.display_fps:
            self.update_fps(unscaled_time, unscaled_delta_time)
        else:
            self.fps_text.active = False

    def update_ui(self, pose_count):
        if self.display_pose_count:
            self.poses_detected_text.active = True
            self.poses_detected_text.text = f"Poses Detected: {pose_count}"
            self.poses_detected_text.color = self.text_color
        else:
            self.poses_detected_text.active = False

    def update_fps(self, unscaled_time, unscaled_delta_time):
        """Refresh the FPS text at most once per fps_refresh_rate seconds"""
        if unscaled_time > self.fps_timer:
            fps = int(1.0 / unscaled_delta_time) if unscaled_delta_time > 0 else 0
            self.fps_text.active = True
            self.fps_text.text = f"FPS: {fps}"
            self.fps_text.color = self.text_color

            self.fps_timer = unscaled_time + self.fps_refresh_rate

    def update_confidence_threshold(self, value):
        """슬라이더 값 변경 (리스너에 전달)"""
        return self.confidence_threshold_slider.set_value(value)

    def draw(self, img):
        img = self.poses_detected_text.draw(img)
        img = self.fps_text.draw(img)
        return img
