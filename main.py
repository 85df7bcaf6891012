import logging
import sys

from pose_overlay import load_config
from pose_overlay.system_runner import run_pose_overlay

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Optional JSON file overriding the defaults in pose_overlay/config.py
config_path = sys.argv[1] if len(sys.argv) > 1 else "config.json"
config = load_config(config_path)

USE_WEBCAM = True
cam_id = 0
video_file = "store-aisle-detection.mp4"
source = cam_id if USE_WEBCAM else video_file

run_pose_overlay(config, source=source, flip=isinstance(source, int), use_popup=True)
