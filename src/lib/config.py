"""
Configuration loading and option resolution

Reads the declarative pdf-markup configuration file (YAML or JSON),
validates it against PdfConfig, and merges it with explicit render
arguments and built-in defaults into one immutable RenderOptions.

Precedence, highest first:
    1. Arguments passed to the render call
    2. Values from the configuration file
    3. Built-in defaults (A4 page, 14pt text, line height = size + 10,
       margin top=50 left=50, black text)
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from ..config import AppSettings, appsettings
from ..models.config import FontPaths, PageMargin, PdfConfig
from ..models.markup import RGB
from .colors import pdfColor_toRGB
from .errors import ConfigError
from .log import LOG

DEFAULT_PAGE_SIZE: Tuple[float, float] = (595, 842)
DEFAULT_FONT_SIZE: float = 14
DEFAULT_LINE_GAP: float = 10
DEFAULT_MARGIN = PageMargin(top=50, left=50)


@dataclass(frozen=True)
class RenderOptions:
    """
    Fully resolved settings for one render call

    Built once at the start of a render and never modified afterwards.
    """
    page_size: Tuple[float, float]
    font_size: float
    line_height: float
    color: RGB
    margin: PageMargin
    font_paths: Optional[FontPaths]
    document_name: str
    output_dir: Path


def config_find(
    search_dir: Optional[Path] = None, settings: AppSettings = appsettings
) -> Optional[Path]:
    """
    Locate the first configuration file in a directory.

    Args:
        search_dir: Directory to search (default: current working directory)
        settings: Supplies the candidate file names, in priority order

    Returns:
        Path of the first existing candidate, or None
    """
    base = Path(search_dir) if search_dir is not None else Path.cwd()
    for name in settings.config_filenames:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def _document_parse(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def config_load(
    path: Optional[Union[str, Path]] = None,
    search_dir: Optional[Path] = None,
    settings: AppSettings = appsettings,
) -> PdfConfig:
    """
    Load and validate a configuration file.

    Args:
        path: Explicit configuration file; must exist if given
        search_dir: Where to look when no explicit path is given
        settings: Application settings (candidate file names)

    Returns:
        Validated PdfConfig; empty when no file is found

    Raises:
        ConfigError: Unreadable file, malformed YAML/JSON, or content
                     that fails validation
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Configuration file not found: {config_path}")
    else:
        found = config_find(search_dir, settings)
        if found is None:
            LOG("No configuration file found; using defaults", level=2)
            return PdfConfig()
        config_path = found

    LOG(f"Loading configuration from {config_path}", level=2)
    try:
        data = _document_parse(config_path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to parse {config_path.name}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"{config_path.name} must contain a mapping, got {type(data).__name__}"
        )

    try:
        return PdfConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path.name}: {e}") from e


def margin_coerce(margin: Union[PageMargin, Mapping[str, float], None]) -> Optional[PageMargin]:
    """Accept a PageMargin or a {"top": .., "left": ..} mapping"""
    if margin is None or isinstance(margin, PageMargin):
        return margin
    try:
        return PageMargin.model_validate(dict(margin))
    except ValidationError as e:
        raise ConfigError(f"Invalid margin {margin!r}: {e}") from e


def options_resolve(
    config: PdfConfig,
    output_dir: Optional[Union[str, Path]] = None,
    document_name: Optional[str] = None,
    margin: Union[PageMargin, Mapping[str, float], None] = None,
    settings: AppSettings = appsettings,
    cwd: Optional[Path] = None,
) -> RenderOptions:
    """
    Merge call arguments, configuration file and defaults.

    Args:
        config: Validated configuration file contents
        output_dir: Explicit output directory
        document_name: Explicit document name prefix
        margin: Explicit page margin
        settings: Application settings (default names and directories)
        cwd: Base for the default output directory (default: current directory)

    Returns:
        RenderOptions for one render
    """
    base = Path(cwd) if cwd is not None else Path.cwd()

    font_size = config.fontSize if config.fontSize is not None else DEFAULT_FONT_SIZE
    line_height = (
        config.lineHeight if config.lineHeight is not None else font_size + DEFAULT_LINE_GAP
    )
    resolved_output = output_dir or config.outputDir or base / settings.default_output_dir

    return RenderOptions(
        page_size=config.pageSize or DEFAULT_PAGE_SIZE,
        font_size=font_size,
        line_height=line_height,
        color=pdfColor_toRGB(config.color),
        margin=margin_coerce(margin) or config.margin or DEFAULT_MARGIN,
        font_paths=config.fontPaths,
        document_name=document_name or config.documentName or settings.default_document_name,
        output_dir=Path(resolved_output),
    )
