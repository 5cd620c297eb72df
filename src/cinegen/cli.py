"""CLI entry point for the cinematic assembler."""

import logging
import shlex
import typer
from pathlib import Path
from typing import Optional
from enum import Enum

from . import __version__
from .config import config
from .models import EDITABLE_FIELDS, PipelineConfig, Resolution, SceneScript
from .projector import ARTIFACT_PATHS
from .session import EditorSession
from .store import SceneStore

app = typer.Typer(
    name="cinegen",
    help="Scene timeline editor for the cinematic rendering pipeline",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"cinegen version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """Cinematic AI Assembler - Edit scenes, generate pipeline code."""
    pass


class ArtifactName(str, Enum):
    """Artifacts that can be previewed."""
    SCRIPT = "script"
    CONFIG = "config"
    MAIN = "main"
    UTILS = "utils"


TRUE_WORDS = {"1", "true", "yes", "on"}
FALSE_WORDS = {"0", "false", "no", "off"}


def build_session(
    script: Optional[Path] = None,
    **overrides,
) -> EditorSession:
    """Create a session from the startup defaults, a scene script and overrides.

    Args:
        script: Optional YAML scene script seeding the timeline.
        **overrides: Pipeline configuration fields; None values are skipped.

    Raises:
        ValueError: If the script or an override is invalid.
    """
    defaults = config.pipeline_defaults()

    if script is not None:
        scene_script = SceneScript.from_yaml(script)
        store = SceneStore.from_scenes(scene_script.scenes, defaults)
        if scene_script.config:
            store.update_config(**scene_script.config)
    else:
        store = SceneStore(config=defaults)

    changes = {key: value for key, value in overrides.items() if value is not None}
    if changes:
        store.update_config(**changes)

    return EditorSession(store)


def coerce_config_value(field: str, raw: str):
    """Convert a typed-in value to the configuration field's type.

    Raises:
        ValueError: If the field is unknown or the value can't be converted.
    """
    if field not in PipelineConfig.model_fields:
        raise ValueError(
            f"Unknown configuration field '{field}'. "
            f"Valid: {', '.join(PipelineConfig.model_fields)}"
        )

    annotation = PipelineConfig.model_fields[field].annotation
    if annotation is bool:
        word = raw.strip().lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
        raise ValueError(f"'{raw}' is not a boolean (use on/off)")
    if annotation is float:
        try:
            return float(raw)
        except ValueError:
            raise ValueError(f"'{raw}' is not a number") from None
    return raw


def echo_scenes(session: EditorSession) -> None:
    """Print the timeline."""
    scenes = session.snapshot.scenes
    if not scenes:
        typer.echo("   No scenes added. Use 'add' to start the timeline.")
        return

    for index, scene in enumerate(scenes):
        typer.echo(f"   #{index + 1} [id {scene.id}] {scene.video} ({scene.transition})")
        if scene.voice:
            voice_preview = scene.voice[:60] + "..." if len(scene.voice) > 60 else scene.voice
            typer.echo(f"      🎙️  {voice_preview}")


def echo_artifacts(session: EditorSession, artifact: Optional[ArtifactName] = None) -> None:
    """Print one artifact's raw text, or all of them with headers."""
    bundle = session.artifacts
    if artifact is not None:
        typer.echo(bundle.get(artifact.value))
        return

    for path, text in bundle.files().items():
        typer.echo(f"── {path} ──")
        typer.echo(text)
        typer.echo("")

    for notice in session.advisories():
        typer.echo(f"⚠️  {notice}")


@app.command()
def preview(
    script: Optional[Path] = typer.Option(
        None,
        "--script",
        "-s",
        help="YAML scene script to start from (defaults to the seed scenes)",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    artifact: Optional[ArtifactName] = typer.Option(
        None,
        "--artifact",
        "-a",
        help="Print only this artifact's raw text"
    ),
    resolution: Optional[Resolution] = typer.Option(
        None,
        "--resolution",
        "-r",
        help="Output resolution"
    ),
    voice: Optional[str] = typer.Option(
        None,
        "--voice",
        help="Edge-TTS voice ID (e.g. vi-VN-HoaiMyNeural, en-US-ChristopherNeural)"
    ),
    bg_volume: Optional[float] = typer.Option(
        None,
        "--bg-volume",
        help="Background music volume outside dialogue"
    ),
    ducking: Optional[float] = typer.Option(
        None,
        "--ducking",
        help="Background music volume during dialogue"
    ),
    upscale: Optional[bool] = typer.Option(
        None,
        "--upscale/--no-upscale",
        help="Enable Real-ESRGAN detail enhancement"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Print the generated pipeline files for a timeline."""
    setup_logging(verbose)

    try:
        session = build_session(
            script,
            resolution=resolution,
            voice_model=voice,
            bg_music_volume=bg_volume,
            ducking_level=ducking,
            use_realesrgan=upscale,
        )
    except Exception as e:
        typer.echo(f"❌ Error loading project: {e}")
        raise typer.Exit(1)

    echo_artifacts(session, artifact)


@app.command()
def scenes(
    script: Optional[Path] = typer.Option(
        None,
        "--script",
        "-s",
        help="YAML scene script (defaults to the seed scenes)",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
) -> None:
    """Show the scene timeline."""
    try:
        session = build_session(script)
    except Exception as e:
        typer.echo(f"❌ Error loading project: {e}")
        raise typer.Exit(1)

    snapshot = session.snapshot
    width, height = snapshot.config.dimensions
    typer.echo(f"🎬 Timeline: {len(snapshot.scenes)} scene(s)")
    typer.echo(f"   Output: {snapshot.config.resolution} ({width}x{height})")
    typer.echo(f"   Voice: {snapshot.config.voice_model}")
    typer.echo("")
    echo_scenes(session)


EDIT_HELP = """Commands:
   list                           Show the timeline
   add                            Append a scene
   rm <id>                        Remove a scene
   set <id> <field> <value...>    Edit video, voice or transition
   config <field> <value>         Edit a pipeline setting
   settings                       Show the pipeline settings
   show [artifact]                Print generated files (script, config, main, utils)
   export                         Download the project (not available)
   help                           Show this help
   quit                           Leave the editor"""


def run_edit_command(session: EditorSession, line: str) -> bool:
    """Apply one editor command. Returns False when the editor should exit.

    Raises:
        ValueError: On malformed commands or invalid values.
    """
    try:
        words = shlex.split(line)
    except ValueError as e:
        raise ValueError(f"Could not parse command: {e}") from None

    if not words:
        return True

    command, args = words[0].lower(), words[1:]

    if command in ("quit", "exit", "q"):
        return False

    if command == "help":
        typer.echo(EDIT_HELP)
    elif command in ("list", "ls"):
        echo_scenes(session)
    elif command == "add":
        scene = session.add_scene()
        typer.echo(f"✅ Added scene {scene.id}: {scene.video}")
    elif command == "rm":
        if len(args) != 1:
            raise ValueError("Usage: rm <id>")
        session.remove_scene(args[0])
        typer.echo(f"🗑️  Scene count: {len(session.snapshot.scenes)}")
    elif command == "set":
        if len(args) < 2:
            raise ValueError("Usage: set <id> <field> <value...>")
        scene_id, field, value = args[0], args[1], " ".join(args[2:])
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field must be one of: {', '.join(EDITABLE_FIELDS)}")
        session.update_scene(scene_id, field, value)
    elif command == "config":
        if len(args) < 2:
            raise ValueError("Usage: config <field> <value>")
        field, raw = args[0], " ".join(args[1:])
        session.update_config(**{field: coerce_config_value(field, raw)})
        for notice in session.advisories():
            typer.echo(f"⚠️  {notice}")
    elif command == "settings":
        for field, value in session.snapshot.config.model_dump().items():
            typer.echo(f"   {field} = {value}")
    elif command == "show":
        artifact = None
        if args:
            if args[0] not in ARTIFACT_PATHS:
                raise ValueError(f"Artifact must be one of: {', '.join(ARTIFACT_PATHS)}")
            artifact = ArtifactName(args[0])
        echo_artifacts(session, artifact)
    elif command == "export":
        session.export()
        typer.echo("ℹ️  Export is not available yet; nothing was written.")
    else:
        raise ValueError(f"Unknown command '{command}'. Type 'help' for a list.")

    return True


@app.command()
def edit(
    script: Optional[Path] = typer.Option(
        None,
        "--script",
        "-s",
        help="YAML scene script to start from (defaults to the seed scenes)",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Edit the timeline and pipeline settings interactively.

    Changes live only for this session; use 'show' to copy the generated
    files out.
    """
    setup_logging(verbose)

    try:
        session = build_session(script)
    except Exception as e:
        typer.echo(f"❌ Error loading project: {e}")
        raise typer.Exit(1)

    typer.echo(f"🎬 Cinematic AI Assembler {__version__} (type 'help' for commands)")
    echo_scenes(session)

    while True:
        try:
            line = typer.prompt("cinegen", default="", show_default=False, prompt_suffix="> ")
        except typer.Abort:
            typer.echo("")
            break

        try:
            if not run_edit_command(session, line):
                break
        except ValueError as e:
            typer.echo(f"❌ {e}")

    session.close()
    typer.echo("👋 Bye")


if __name__ == "__main__":
    app()
