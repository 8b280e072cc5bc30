from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SOURCES: tuple[str, ...] = (
    "css/base.css",
    "css/profile.css",
)
DEFAULT_OUTPUT = "dist/myoshi-profile.css"

SCOPING_PREFIX = ".profile-page.profile-custom-css"

# Host page chrome and host-owned dropdown components.
PROTECTED_SELECTORS: tuple[str, ...] = (
    "header.header",
    "footer.site-footer",
    "notification-dropdown",
    "profile-actions-dropdown",
)

MAX_OUTPUT_SIZE = 50000
MAX_Z_INDEX = 10000


class ValidationRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    scoping_prefix: str = SCOPING_PREFIX
    protected_selectors: tuple[str, ...] = PROTECTED_SELECTORS
    max_z_index: int = MAX_Z_INDEX


class BuildConfig(BaseModel):
    """Everything a build needs to know, passed explicitly into the pipeline.

    ``sources`` and ``output`` are relative to ``root`` unless absolute.
    """

    model_config = ConfigDict(frozen=True)

    root: Path = Path(".")
    sources: tuple[str, ...] = Field(default=DEFAULT_SOURCES, min_length=1)
    output: str = DEFAULT_OUTPUT
    rules: ValidationRules = ValidationRules()
    max_output_size: int = MAX_OUTPUT_SIZE

    @classmethod
    def for_root(cls, root: str | Path) -> "BuildConfig":
        return cls(root=Path(root))

    @property
    def output_path(self) -> Path:
        return self.root / self.output

    @property
    def output_name(self) -> str:
        return Path(self.output).name

    @field_validator("sources")
    @classmethod
    def _unique_sources(cls, sources: tuple[str, ...]) -> tuple[str, ...]:
        seen: set[str] = set()
        for source in sources:
            if source in seen:
                raise ValueError(f"Duplicate source: {source}")
            seen.add(source)
        return sources
