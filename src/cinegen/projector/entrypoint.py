"""Entry-point program (main.py) rendering.

The generated program is never run here. It describes, scene by scene, what
the external rendering pipeline does: narration synthesis, clip loading and
optional upscaling, color treatment, audio/video sync, transition joins,
then concatenation, ducked background music and the final encode.
"""

from typing import List, Sequence

from ..models import PipelineConfig, Scene
from .pipeline_config import python_literal

# Final encode settings expected by the downstream pipeline
ENCODER_PROFILE = {
    "codec": "hevc_nvenc",
    "audio_codec": "aac",
    "bitrate": "50000k",
    "ffmpeg_params": ["-profile:v", "main10", "-preset", "p4", "-pix_fmt", "yuv420p10le"],
    "threads": 8,
}

INDENT = "    "


def _preamble(config: PipelineConfig) -> List[str]:
    moviepy_names = ["concatenate_videoclips", "CompositeAudioClip"]
    if not config.use_realesrgan:
        moviepy_names.insert(0, "VideoFileClip")
    video_utils = ["apply_cinematic_color", "sync_video_audio", "apply_transition"]
    if config.use_realesrgan:
        video_utils.insert(0, "upscale_video_8k")

    return [
        "import json",
        "import os",
        "import asyncio",
        f"from moviepy.editor import {', '.join(moviepy_names)}",
        "from src.config import *",
        "from src.audio_utils import generate_tts_audio, create_ducking_effect",
        f"from src.video_utils import {', '.join(video_utils)}",
        "",
        "async def main():",
        f"{INDENT}if not os.path.exists(TEMP_DIR): os.makedirs(TEMP_DIR)",
        "",
        f'{INDENT}print("=== STARTING CINEMATIC AI ASSEMBLER ({config.resolution}) ===")',
        "",
        f"{INDENT}with open('script.json', 'r', encoding='utf-8') as f:",
        f"{INDENT * 2}script = json.load(f)",
        "",
        f"{INDENT}final_clips = []",
        f"{INDENT}voice_clips_metadata = []",
        f"{INDENT}current_time = 0.0",
    ]


def _scene_block(index: int, scene: Scene, config: PipelineConfig) -> List[str]:
    entry = scene.to_manifest_entry()
    lines = [
        "",
        f"{INDENT}# Scene {index + 1}: {python_literal(entry['video'])}, transition {python_literal(entry['transition'])}",
        f"{INDENT}scene = script[{index}]",
        f'{INDENT}print(f"\\nProcessing Scene {index + 1}: {{scene[\'video\']}}")',
        "",
        f"{INDENT}# Audio",
        f'{INDENT}tts_path = os.path.join(TEMP_DIR, "voice_{index}.mp3")',
        f"{INDENT}await generate_tts_audio(scene['voice'], tts_path, VOICE_NAME)",
        "",
        f"{INDENT}# Video Processing",
        f"{INDENT}video_path = os.path.join(ASSETS_DIR, 'clips', scene['video'])",
    ]
    if config.use_realesrgan:
        lines.append(f'{INDENT}processed_clip = upscale_video_8k(video_path, "upscaled_{index}.mp4")')
    else:
        lines.append(f"{INDENT}processed_clip = VideoFileClip(video_path)")
    lines.extend([
        f"{INDENT}processed_clip = apply_cinematic_color(processed_clip)",
        "",
        f"{INDENT}# Sync & Transition",
        f"{INDENT}synced_clip = sync_video_audio(processed_clip, tts_path)",
        f"{INDENT}synced_clip = apply_transition(synced_clip, {python_literal(entry['transition'])})",
        "",
        f"{INDENT}final_clips.append(synced_clip)",
        f"{INDENT}voice_clips_metadata.append((synced_clip.audio, current_time))",
        f"{INDENT}current_time += synced_clip.duration",
    ])
    return lines


def _postamble() -> List[str]:
    params = ", ".join(f'"{p}"' for p in ENCODER_PROFILE["ffmpeg_params"])
    return [
        "",
        f"{INDENT}if not final_clips:",
        f'{INDENT * 2}print("No scenes to render.")',
        f"{INDENT * 2}return",
        "",
        f'{INDENT}print("\\nAssembling Timeline...")',
        f'{INDENT}final_video = concatenate_videoclips(final_clips, method="compose")',
        f"{INDENT}final_video = final_video.resize(newsize=(TARGET_WIDTH, TARGET_HEIGHT))",
        "",
        f"{INDENT}# Audio Ducking",
        f"{INDENT}bg_music_path = os.path.join(ASSETS_DIR, 'music', 'bg_music.mp3')",
        f"{INDENT}if os.path.exists(bg_music_path):",
        f"{INDENT * 2}bg_music = create_ducking_effect(",
        f"{INDENT * 3}bg_music_path, voice_clips_metadata, final_video.duration,",
        f"{INDENT * 3}BG_MUSIC_VOLUME_NORMAL, BG_MUSIC_VOLUME_DUCKING",
        f"{INDENT * 2})",
        f"{INDENT * 2}final_video = final_video.set_audio(CompositeAudioClip([bg_music, final_video.audio]))",
        "",
        f"{INDENT}# Rendering",
        f'{INDENT}print(f"\\nRendering to {{OUTPUT_FILE}} using NVENC...")',
        f"{INDENT}final_video.write_videofile(",
        f"{INDENT * 2}OUTPUT_FILE,",
        f"{INDENT * 2}fps=FPS,",
        f'{INDENT * 2}codec="{ENCODER_PROFILE["codec"]}",',
        f'{INDENT * 2}audio_codec="{ENCODER_PROFILE["audio_codec"]}",',
        f'{INDENT * 2}bitrate="{ENCODER_PROFILE["bitrate"]}",',
        f"{INDENT * 2}ffmpeg_params=[{params}],",
        f"{INDENT * 2}threads={ENCODER_PROFILE['threads']}",
        f"{INDENT})",
        "",
        'if __name__ == "__main__":',
        f"{INDENT}asyncio.run(main())",
    ]


def render_entrypoint(scenes: Sequence[Scene], config: PipelineConfig) -> str:
    """Render the pipeline's main.py for the given timeline.

    Args:
        scenes: Scenes in timeline order. An empty sequence renders the
            preamble and postamble with no scene blocks.
        config: Current pipeline configuration.

    Returns:
        Python source text.
    """
    lines = _preamble(config)
    for index, scene in enumerate(scenes):
        lines.extend(_scene_block(index, scene, config))
    lines.extend(_postamble())
    return "\n".join(lines)
