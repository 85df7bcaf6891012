"""
자세 데이터 타입
"""
from dataclasses import dataclass, field
from typing import List, Tuple


# PoseNet body part order (COCO 포맷)
COCO_BODY_PART_NAMES = (
    "nose", "leftEye", "rightEye", "leftEar", "rightEar",
    "leftShoulder", "rightShoulder", "leftElbow", "rightElbow",
    "leftWrist", "rightWrist", "leftHip", "rightHip",
    "leftKnee", "rightKnee", "leftAnkle", "rightAnkle",
)


@dataclass
class BodyPart:
    """A single joint. Coordinates are rewritten in place when rescaled."""
    index: int
    coordinates: Tuple[float, float]
    prob: float = 0.0

    @property
    def name(self):
        if 0 <= self.index < len(COCO_BODY_PART_NAMES):
            return COCO_BODY_PART_NAMES[self.index]
        return f"part{self.index}"


@dataclass
class HumanPose2D:
    """One detected person."""
    index: int
    body_parts: List[BodyPart] = field(default_factory=list)
