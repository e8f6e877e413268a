import json
from pathlib import Path
from typing import Any, ClassVar, Literal, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .errors import ErrorKind

BackgroundMode = Literal["transparent", "blur"]
OutcomeStatus = Literal["ok", "skipped", "error"]


class ResizeConfig(BaseModel):
    """Settings for a batch resize run.

    Keys are accepted in camelCase (``imagesDirectory``, ``targetWidth``, ...)
    as found in JSON config files, or by their attribute names.

    Attributes:
        images_directory: Directory scanned for source images
        output_directory: Where resized PNGs are written (defaults to images_directory)
        target_width: Bounding box width in pixels
        target_height: Bounding box height in pixels
        resize_ratio: Extra scale factor applied on top of the fit ratio, in (0, 1]
        min_width: Smallest accepted source width
        min_height: Smallest accepted source height
        backend: Name of the image backend to use
        background: Letterbox fill, transparent or a blurred copy of the source
        blur_block_size: Block size of the background blur
        output_prefix: Prefix of output file names; inputs carrying it are skipped
    """

    images_directory: Path
    output_directory: Path | None = None
    target_width: int = Field(400, gt=0)
    target_height: int = Field(400, gt=0)
    resize_ratio: float = Field(1.0, gt=0, le=1)
    min_width: int = Field(400, ge=0)
    min_height: int = Field(400, ge=0)
    backend: str = "pillow"
    background: BackgroundMode = "transparent"
    blur_block_size: int = Field(10, gt=0)
    output_prefix: str = "Resize-"

    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    @field_validator("output_prefix")
    @classmethod
    def validate_output_prefix(cls, v: str) -> str:
        if not v:
            raise ValueError("output_prefix must not be empty")
        return v

    @classmethod
    def from_json_file(cls, path: str | Path, **overrides: object) -> "ResizeConfig":
        """Load a JSON config file, letting non-None overrides win.

        The file may leave out fields (even required ones) that the overrides
        supply; the merged result is validated once.
        """
        data = cast(Any, json.loads(Path(path).read_text(encoding="utf-8")))
        if not isinstance(data, dict):
            return cls.model_validate(data)

        # Keys are normalized to aliases so a flag replaces the file's entry
        aliases = {name: field.alias or name for name, field in cls.model_fields.items()}
        merged = {aliases.get(key, key): value for key, value in data.items()}
        for key, value in overrides.items():
            if value is not None:
                merged[aliases.get(key, key)] = value
        return cls.model_validate(merged)

    @property
    def resolved_output_directory(self) -> Path:
        return self.output_directory if self.output_directory is not None else self.images_directory


class ResizeOutcome(BaseModel):
    """Result of resizing one file in a batch run."""

    input_path: str
    output_path: str | None = None
    backend: str
    status: OutcomeStatus
    error_kind: ErrorKind | None = None
    error_message: str | None = None
    elapsed_seconds: float = Field(0.0, ge=0)
