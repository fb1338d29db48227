"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDLITE_ prefix (e.g., MDLITE_TASK_CHECKBOXES=false).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MDLITE_ prefix.

    Examples:
        MDLITE_CLASS_PREFIX=md-
        MDLITE_LIST_INDENT_WIDTH=4
        MDLITE_PREVIEW_MAX_LINES=5
    """

    model_config = SettingsConfigDict(
        env_prefix="MDLITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Decorator configuration
    class_prefix: str = Field(
        default="md-",
        description="Prefix for the semantic class hooks added by the decorator",
    )

    # List configuration
    list_indent_width: int = Field(
        default=2,
        ge=1,
        description="Number of leading whitespace characters per list nesting level",
    )

    task_checkboxes: bool = Field(
        default=True,
        description="Render '- [ ] item' / '- [x] item' list entries as todo checkboxes",
    )

    # Preview configuration
    preview_max_lines: int = Field(
        default=10,
        ge=1,
        description="Default number of source lines rendered by preview()",
    )

    preview_marker_text: str = Field(
        default="...",
        description="Text of the truncation marker appended to long previews",
    )

    # Description configuration
    auto_bullet_descriptions: bool = Field(
        default=False,
        description="Prefix plain description lines with bullets (or checkboxes for todos)",
    )

    # Source view configuration
    source_style: str = Field(
        default="default",
        description="Pygments style used for the highlighted source view",
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable debug output during rendering",
    )

    def className_make(self, suffix: str) -> str:
        """
        Build a semantic class name from the configured prefix.

        Args:
            suffix: Class suffix (e.g., "h1", "list-ordered")

        Returns:
            Prefixed class name

        Example:
            >>> settings = AppSettings()
            >>> settings.className_make('bold')
            'md-bold'
        """
        return f"{self.class_prefix}{suffix}"

    def previewMarker_make(self) -> str:
        """
        Build the truncation marker appended to shortened previews.

        Example:
            >>> settings = AppSettings()
            >>> settings.previewMarker_make()
            '<p class="md-preview-more">...</p>'
        """
        return f'<p class="{self.className_make("preview-more")}">{self.preview_marker_text}</p>'


# Singleton instance - import this in your code
appsettings = AppSettings()
