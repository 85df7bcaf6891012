"""
자세 시각화 모듈
"""
from abc import ABC, abstractmethod

import cv2
import numpy as np


# 색상 정의 (각 키포인트별)
COLORS = (
    (255, 0, 0), (255, 0, 255), (170, 0, 255), (255, 0, 85), (255, 0, 170),
    (85, 255, 0), (255, 170, 0), (0, 255, 0), (255, 255, 0), (0, 255, 85),
    (170, 255, 0), (0, 85, 255), (0, 255, 170), (0, 0, 255), (0, 255, 255),
    (85, 0, 255), (0, 170, 255),
)

# 기본 스켈레톤 구조 (COCO 포맷)
SKELETON = (
    (15, 13), (13, 11), (16, 14), (14, 12), (11, 12), (5, 11), (6, 12), (5, 6),
    (5, 7), (6, 8), (7, 9), (8, 10), (1, 2), (0, 1), (0, 2), (1, 3), (2, 4),
    (3, 5), (4, 6),
)


class Visualizer(ABC):
    @abstractmethod
    def update_pose_visualizations(self, poses, confidence_threshold):
        ...


class PoseVisualizer(Visualizer):
    """Keeps the latest poses and draws them onto frames"""

    def __init__(self, colors=COLORS, skeleton=SKELETON, point_radius=3, line_thickness=4):
        self.colors = colors
        self.skeleton = skeleton
        self.point_radius = point_radius
        self.line_thickness = line_thickness
        self.poses = []
        self.confidence_threshold = 0.5

    def update_pose_visualizations(self, poses, confidence_threshold):
        self.poses = poses
        self.confidence_threshold = confidence_threshold

    def _color(self, index):
        return self.colors[index % len(self.colors)]

    def draw_keypoints(self, img):
        """키포인트 그리기"""
        for pose in self.poses:
            for part in pose.body_parts:
                if part.prob > self.confidence_threshold:
                    point = (int(part.coordinates[0]), int(part.coordinates[1]))
                    cv2.circle(img, point, self.point_radius, self._color(part.index), 2)
        return img

    def draw_skeleton(self, img):
        """스켈레톤 그리기"""
        img_limbs = np.copy(img)

        for pose in self.poses:
            parts = {part.index: part for part in pose.body_parts}
            for i, j in self.skeleton:
                start, end = parts.get(i), parts.get(j)
                if start is None or end is None:
                    continue
                if start.prob > self.confidence_threshold and end.prob > self.confidence_threshold:
                    cv2.line(
                        img_limbs,
                        (int(start.coordinates[0]), int(start.coordinates[1])),
                        (int(end.coordinates[0]), int(end.coordinates[1])),
                        color=self._color(j),
                        thickness=self.line_thickness,
                    )

        # 원본 이미지와 스켈레톤 이미지 블렌딩
        cv2.addWeighted(img, 0.4, img_limbs, 0.6, 0, dst=img)
        return img

    def draw(self, img):
        """전체 자세 그리기 (키포인트 + 스켈레톤)"""
        img = self.draw_keypoints(img)
        img = self.draw_skeleton(img)
        return img
