"""Pipeline configuration (src/config.py) rendering."""

import json

from ..models import PipelineConfig

FPS = 24

REAL_ESRGAN_BIN = "os.path.join(BASE_DIR, 'models', 'realesrgan-ncnn-vulkan.exe')"

# Written in place of the upscaler path when upscaling is off
ABSENT = "None"


def output_file_name(resolution: str) -> str:
    """Return the rendered video's file name for a resolution tag."""
    return f"output_{resolution}_masterpiece.mp4"


def python_literal(value) -> str:
    """Format a value as a Python literal for the generated sources."""
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def render_pipeline_config(config: PipelineConfig) -> str:
    """Render the parameter module imported by the rendering pipeline.

    Args:
        config: Current pipeline configuration.

    Returns:
        Python source defining TARGET_WIDTH, TARGET_HEIGHT, FPS, the path
        constants, OUTPUT_FILE, REAL_ESRGAN_BIN, VOICE_NAME and the two
        background music volumes.
    """
    width, height = config.dimensions
    upscaler = REAL_ESRGAN_BIN if config.use_realesrgan else ABSENT

    lines = [
        "import os",
        "",
        "# Output Resolution",
        f"TARGET_WIDTH = {width}",
        f"TARGET_HEIGHT = {height}",
        f"FPS = {FPS}",
        "",
        "# Paths",
        "BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))",
        "ASSETS_DIR = os.path.join(BASE_DIR, 'assets')",
        "TEMP_DIR = os.path.join(ASSETS_DIR, 'temp')",
        f"OUTPUT_FILE = os.path.join(BASE_DIR, '{output_file_name(config.resolution)}')",
        "",
        "# AI Models",
        f"REAL_ESRGAN_BIN = {upscaler}",
        "",
        "# Audio Settings",
        f"VOICE_NAME = {python_literal(config.voice_model)}",
        f"BG_MUSIC_VOLUME_NORMAL = {python_literal(config.bg_music_volume)}",
        f"BG_MUSIC_VOLUME_DUCKING = {python_literal(config.ducking_level)}",
    ]
    return "\n".join(lines)
