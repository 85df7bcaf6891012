"""
설정 모듈

Runtime settings for the inference pipeline, the text overlay and the model
download. Defaults match the demo scene; a JSON file may override any of them.
"""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UIConfig:
    text_color: tuple = (0, 0, 0)  # BGR
    display_pose_count: bool = True
    display_fps: bool = True
    # Seconds between FPS refreshes, expected range [0.01, 1.0]
    fps_refresh_rate: float = 0.1


@dataclass(frozen=True)
class InferenceConfig:
    target_dim: int = 224
    use_compute_shaders: bool = False
    score_threshold: float = 0.25  # [0, 1]
    nms_radius: int = 70  # [0, 200]
    max_poses: int = 20
    use_multi_pose_decoding: bool = False
    confidence_threshold: float = 0.5  # [0, 1]


@dataclass(frozen=True)
class ModelConfig:
    model_name: str = "posenet-resnet50"
    precision: str = "FP16"
    base_dir: str = "model"
    # Directory URL holding <model_name>.xml and <model_name>.bin. Empty disables downloading.
    url_dir: str = ""
    device: str = "AUTO"
    output_stride: int = 32
    # "module:callable" producing HumanPose2D lists from raw model outputs
    decoder: str = ""

    @property
    def model_path(self):
        return Path(self.base_dir) / self.model_name / self.precision / f"{self.model_name}.xml"


@dataclass(frozen=True)
class AppConfig:
    ui: UIConfig = field(default_factory=UIConfig)
    inference: InferenceConfig = field(default_factory=InferenceConfig)
    model: ModelConfig = field(default_factory=ModelConfig)


def _as_int(v, default):
    try:
        return int(v)
    except (TypeError, ValueError):
        return int(default)


def _as_float(v, default):
    try:
        return float(v)
    except (TypeError, ValueError):
        return float(default)


def _as_bool(v, default):
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in ("1", "true", "yes", "on")
    return bool(default)


def _as_str(v, default=""):
    return str(v) if v is not None else str(default)


def _as_color(v, default):
    if isinstance(v, (list, tuple)) and len(v) == 3:
        try:
            return tuple(int(c) for c in v)
        except (TypeError, ValueError):
            pass
    return tuple(default)


def _section(raw, key):
    value = raw.get(key)
    return value if isinstance(value, dict) else {}


def _parse_ui(obj):
    d = UIConfig()
    return UIConfig(
        text_color=_as_color(obj.get("text_color"), d.text_color),
        display_pose_count=_as_bool(obj.get("display_pose_count"), d.display_pose_count),
        display_fps=_as_bool(obj.get("display_fps"), d.display_fps),
        fps_refresh_rate=_as_float(obj.get("fps_refresh_rate", d.fps_refresh_rate), d.fps_refresh_rate),
    )


def _parse_inference(obj):
    d = InferenceConfig()
    return InferenceConfig(
        target_dim=_as_int(obj.get("target_dim", d.target_dim), d.target_dim),
        use_compute_shaders=_as_bool(obj.get("use_compute_shaders"), d.use_compute_shaders),
        score_threshold=_as_float(obj.get("score_threshold", d.score_threshold), d.score_threshold),
        nms_radius=_as_int(obj.get("nms_radius", d.nms_radius), d.nms_radius),
        max_poses=_as_int(obj.get("max_poses", d.max_poses), d.max_poses),
        use_multi_pose_decoding=_as_bool(obj.get("use_multi_pose_decoding"), d.use_multi_pose_decoding),
        confidence_threshold=_as_float(
            obj.get("confidence_threshold", d.confidence_threshold), d.confidence_threshold
        ),
    )


def _parse_model(obj):
    d = ModelConfig()
    return ModelConfig(
        model_name=_as_str(obj.get("model_name"), d.model_name),
        precision=_as_str(obj.get("precision"), d.precision),
        base_dir=_as_str(obj.get("base_dir"), d.base_dir),
        url_dir=_as_str(obj.get("url_dir"), d.url_dir),
        device=_as_str(obj.get("device"), d.device),
        output_stride=_as_int(obj.get("output_stride", d.output_stride), d.output_stride),
        decoder=_as_str(obj.get("decoder"), d.decoder),
    )


def load_config(path=None):
    """Load an AppConfig from a JSON file, falling back to defaults."""
    if path is None:
        return AppConfig()
    p = Path(path).expanduser()
    if not p.exists():
        logger.info("Config file %s not found, using defaults", p)
        return AppConfig()
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Could not read config %s (%s), using defaults", p, e)
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    return AppConfig(
        ui=_parse_ui(_section(raw, "ui")),
        inference=_parse_inference(_section(raw, "inference")),
        model=_parse_model(_section(raw, "model")),
    )
