import pytest

pytest.importorskip("openvino")

from pose_overlay.config import ModelConfig  # noqa: E402
from pose_overlay.model_manager import ModelManager  # noqa: E402


class FakeLayer:
    def __init__(self, name):
        self.any_name = name


class FakeCompiledModel:
    outputs = [FakeLayer("heatmaps"), FakeLayer("offsets")]

    def input(self, index):
        return FakeLayer("image")


class FakeCore:
    def __init__(self):
        self.read = []
        self.compiled = []

    def read_model(self, path):
        self.read.append(path)
        return "model"

    def compile_model(self, model, device_name, config):
        self.compiled.append((model, device_name))
        return FakeCompiledModel()


class RecordingDownloader:
    def __init__(self):
        self.calls = []

    def download_file(self, url, filename, directory):
        self.calls.append(url)
        directory.mkdir(parents=True, exist_ok=True)
        (directory / filename).write_text("data")
        return directory / filename


def make_manager(tmp_path, url_dir="http://host/models"):
    config = ModelConfig(base_dir=str(tmp_path), url_dir=url_dir, device="CPU")
    downloader = RecordingDownloader()
    core = FakeCore()
    return ModelManager(config, download_helper=downloader, core=core), downloader, core


def test_missing_model_without_url_raises(tmp_path):
    manager, _, _ = make_manager(tmp_path, url_dir="")
    with pytest.raises(FileNotFoundError):
        manager.download_model()


def test_downloads_xml_and_bin(tmp_path):
    manager, downloader, _ = make_manager(tmp_path)

    manager.download_model()

    assert downloader.calls == [
        "http://host/models/posenet-resnet50.xml",
        "http://host/models/posenet-resnet50.bin",
    ]
    assert manager.model_path.with_suffix(".bin").exists()


def test_missing_weights_triggers_download(tmp_path):
    manager, downloader, _ = make_manager(tmp_path)
    manager.model_path.parent.mkdir(parents=True)
    manager.model_path.write_text("xml only")

    manager.download_model()

    assert downloader.calls[-1].endswith(".bin")


def test_complete_model_is_not_downloaded(tmp_path):
    manager, downloader, _ = make_manager(tmp_path)
    manager.model_path.parent.mkdir(parents=True)
    manager.model_path.write_text("xml")
    manager.model_path.with_suffix(".bin").write_text("bin")

    manager.download_model()

    assert downloader.calls == []


def test_model_info_requires_loaded_model(tmp_path):
    manager, _, _ = make_manager(tmp_path)
    with pytest.raises(ValueError):
        manager.get_model_info()


def test_load_model_compiles_and_reports_info(tmp_path):
    manager, _, core = make_manager(tmp_path)

    manager.load_model()
    info = manager.get_model_info()

    assert core.read == [manager.model_path]
    assert core.compiled == [("model", "CPU")]
    assert info["input_name"] == "image"
    assert info["output_names"] == ["heatmaps", "offsets"]
