"""
모델 다운로드, 초기화, 컴파일을 담당하는 모듈
"""
import logging

import openvino as ov
import openvino.properties.hint as hints

from .config import ModelConfig
from .download_utils import DownloadHelper

logger = logging.getLogger(__name__)


class ModelManager:
    def __init__(self, config=None, download_helper=None, core=None):
        self.config = config or ModelConfig()
        self.model_path = self.config.model_path
        self.download_helper = download_helper or DownloadHelper()
        self.core = core or ov.Core()
        self.model = None
        self.compiled_model = None

    def download_model(self):
        """모델 파일 다운로드 (이미 있으면 스킵)"""
        weights_path = self.model_path.with_suffix(".bin")
        if self.model_path.exists() and weights_path.exists():
            return self.model_path
        if not self.config.url_dir:
            raise FileNotFoundError(
                f"Model file {self.model_path} not found and no download URL is configured"
            )

        url_dir = self.config.url_dir.rstrip("/") + "/"
        name = self.config.model_name
        self.download_helper.download_file(
            url_dir + name + ".xml", self.model_path.name, self.model_path.parent
        )
        self.download_helper.download_file(
            url_dir + name + ".bin",
            weights_path.name,
            weights_path.parent,
        )
        return self.model_path

    def load_model(self, device=None):
        """모델 로드 및 컴파일"""
        self.download_model()
        device = device or self.config.device

        logger.info("Loading %s on %s", self.model_path, device)
        self.model = self.core.read_model(self.model_path)
        self.compiled_model = self.core.compile_model(
            model=self.model,
            device_name=device,
            config={hints.performance_mode(): hints.PerformanceMode.LATENCY},
        )
        return self.compiled_model

    def get_model_info(self):
        """모델 입출력 정보 반환"""
        if self.compiled_model is None:
            raise ValueError("Model is not loaded. Call load_model() first.")

        input_layer = self.compiled_model.input(0)
        output_layers = self.compiled_model.outputs

        return {
            "input_layer": input_layer,
            "output_layers": output_layers,
            "input_name": input_layer.any_name,
            "output_names": [o.any_name for o in output_layers],
        }
