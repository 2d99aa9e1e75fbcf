"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use PDFMARKUP_ prefix (e.g., PDFMARKUP_FONTS_DIR=/opt/fonts).

Settings can also be loaded from a .env file in the project root. These are
process-level defaults only; per-document values come from the declarative
configuration file and from explicit render arguments.
"""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use PDFMARKUP_ prefix.

    Examples:
        PDFMARKUP_DEFAULT_DOCUMENT_NAME=invoice
        PDFMARKUP_DEFAULT_OUTPUT_DIR=build/pdf
        PDFMARKUP_CONFIG_FILENAMES='["markup.yaml"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="PDFMARKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Configuration file discovery
    config_filenames: List[str] = Field(
        default=[
            "pdf-markup.config.yaml",
            "pdf-markup.config.yml",
            "pdf-markup.config.json",
        ],
        description="Configuration file names searched in the working directory, in order",
    )

    # Fonts
    fonts_dir: str = Field(
        default=str(Path(__file__).resolve().parent.parent / "fonts"),
        description="Directory holding the default Roboto/static/Roboto-*.ttf files",
    )

    # Output configuration
    default_document_name: str = Field(
        default="document",
        description="Prefix for generated file names when none is configured",
    )

    default_output_dir: str = Field(
        default="generated",
        description="Output directory (relative to the working directory) when none is configured",
    )

    output_extension: str = Field(
        default="pdf",
        description="Extension of generated documents",
    )

    def outputFilename_make(self, document_name: str, timestamp: int) -> str:
        """
        Build the output file name for a render.

        Args:
            document_name: Document name prefix
            timestamp: Milliseconds since the epoch

        Returns:
            File name such as "report-1760000000000.pdf"

        Example:
            >>> settings = AppSettings()
            >>> settings.outputFilename_make("report", 1700000000000)
            'report-1700000000000.pdf'
        """
        return f"{document_name}-{timestamp}.{self.output_extension}"


# Singleton instance - import this in your code
appsettings = AppSettings()
