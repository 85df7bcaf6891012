import json

from pose_overlay.config import AppConfig, InferenceConfig, load_config


def test_defaults_without_path():
    config = load_config()
    assert config == AppConfig()
    assert config.inference.target_dim == 224
    assert config.inference.score_threshold == 0.25
    assert config.inference.nms_radius == 70
    assert config.ui.fps_refresh_rate == 0.1


def test_missing_file_uses_defaults(tmp_path):
    assert load_config(tmp_path / "nope.json") == AppConfig()


def test_malformed_file_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(path) == AppConfig()


def test_partial_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "ui": {"text_color": [255, 255, 255], "display_fps": "off"},
                "inference": {"max_poses": "5", "use_multi_pose_decoding": True, "nms_radius": "bad"},
                "model": {"decoder": "mypkg.decode:decode_poses", "output_stride": 16},
            }
        ),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.ui.text_color == (255, 255, 255)
    assert config.ui.display_fps is False
    assert config.ui.display_pose_count is True
    assert config.inference.max_poses == 5
    assert config.inference.use_multi_pose_decoding is True
    assert config.inference.nms_radius == InferenceConfig().nms_radius
    assert config.model.decoder == "mypkg.decode:decode_poses"
    assert config.model.output_stride == 16
    assert config.model.model_path.name == "posenet-resnet50.xml"
