"""Render settings and project file loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_PRESET
from .errors import ProjectFileError, ScreenshotStudioError
from .models import OutputSpec, Slide, Style

# Load .env file
load_dotenv()

_logger = logging.getLogger("config")


class RenderSettings(BaseSettings):
    """Environment-driven settings (SCREENSHOTS_* variables)."""

    model_config = SettingsConfigDict(env_prefix="SCREENSHOTS_")

    fonts_dir: Path | None = None
    log_dir: Path = Path("logs")
    log_level: str = "INFO"
    default_preset: str = DEFAULT_PRESET


class Project(BaseModel):
    """A slide collection with its shared style and output size."""

    output: OutputSpec
    style: Style = Field(default_factory=Style)
    slides: list[Slide] = Field(default_factory=list)


def _resolve_output(data: Any, default_preset: str) -> OutputSpec:
    if data is None:
        return OutputSpec.from_preset(default_preset)
    if not isinstance(data, dict):
        raise ProjectFileError(f"'output' must be a mapping, got {type(data).__name__}")
    if "preset" in data:
        return OutputSpec.from_preset(data["preset"])
    return OutputSpec.from_size(data.get("width"), data.get("height"))


def _resolve_slide(data: Any, number: int, base_dir: Path) -> dict[str, Any]:
    if isinstance(data, str):
        data = {"text": data}
    if not isinstance(data, dict):
        raise ProjectFileError(f"Slide {number} must be a mapping or a caption string")

    slide = dict(data)
    slide.setdefault("id", number)
    image = slide.get("image")
    if image is not None:
        image_path = Path(image)
        if not image_path.is_absolute():
            image_path = base_dir / image_path
        slide["image"] = image_path
    return slide


def load_project(
    project_path: Path,
    settings: RenderSettings | None = None,
) -> Project:
    """Load a project from a YAML file.

    Image paths are resolved relative to the project file. Images are not
    read here; a missing or broken image only drops that slide's image at
    render time.

    Raises:
        ProjectFileError: If the file cannot be read or does not validate.
    """
    settings = settings or RenderSettings()
    project_path = Path(project_path)

    try:
        with open(project_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ProjectFileError(f"Cannot read project file {project_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ProjectFileError(f"Invalid YAML in {project_path}: {e}") from e

    if not isinstance(data, dict):
        raise ProjectFileError(f"{project_path} must contain a mapping at the top level")

    base_dir = project_path.parent
    try:
        output = _resolve_output(data.get("output"), settings.default_preset)
        slides = [
            _resolve_slide(slide, number, base_dir)
            for number, slide in enumerate(data.get("slides") or [], start=1)
        ]
        project = Project(output=output, style=data.get("style") or {}, slides=slides)
    except ProjectFileError:
        raise
    except (ValidationError, ScreenshotStudioError) as e:
        raise ProjectFileError(f"Invalid project file {project_path}: {e}") from e

    _logger.info(
        f"Loaded {len(project.slides)} slide(s) from {project_path} "
        f"at {project.output.width}x{project.output.height}"
    )
    return project
