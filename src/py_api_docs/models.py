"""Input and output models for the merge pipeline."""

from pathlib import PurePath
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class PathModification(BaseModel):
    """Rewrite the paths of one input before they are merged."""

    strip_start: Optional[str] = None
    prepend: Optional[str] = None

    def apply(self, path: str) -> str:
        if self.strip_start and path.startswith(self.strip_start):
            path = path[len(self.strip_start):]
        if self.prepend:
            path = self.prepend + path
        return path


class OperationSelection(BaseModel):
    """Filter the operations of one input by tag."""

    include_tags: List[str] = []
    exclude_tags: List[str] = []

    def keeps(self, operation: Dict[str, Any]) -> bool:
        tags = set(operation.get("tags") or [])
        if self.include_tags and not tags.intersection(self.include_tags):
            return False
        if tags.intersection(self.exclude_tags):
            return False
        return True


class Dispute(BaseModel):
    """How to rename components of one input when their names collide."""

    prefix: Optional[str] = None
    suffix: Optional[str] = None
    always_apply: bool = False

    @model_validator(mode="after")
    def _one_affix(self) -> "Dispute":
        if bool(self.prefix) == bool(self.suffix):
            raise ValueError("a dispute needs exactly one of prefix or suffix")
        return self

    def rename(self, name: str) -> str:
        if self.prefix:
            return f"{self.prefix}{name}"
        return f"{name}{self.suffix}"


class DescriptionMerge(BaseModel):
    append: bool = False
    title: Optional[str] = None


class MergeInput(BaseModel):
    """One document handed to the merge, with its per-input options."""

    oas: Dict[str, Any]
    path_modification: Optional[PathModification] = None
    operation_selection: Optional[OperationSelection] = None
    dispute: Optional[Dispute] = None
    description: Optional[DescriptionMerge] = None


class SpecInput(MergeInput):
    """A spec file read from the specs directory."""

    file: str

    @property
    def title(self) -> str:
        info = self.oas.get("info") or {}
        return info.get("title") or PurePath(self.file).stem

    @property
    def servers(self) -> List[Dict[str, Any]]:
        return list(self.oas.get("servers") or [])


class SwaggerUrl(BaseModel):
    """An entry in the Swagger UI document selector."""

    url: str
    name: str


class BuildResult(BaseModel):
    """Summary of a finished build."""

    spec_files: List[str]
    merged_spec_path: str
    index_path: str
    path_count: int = 0
    server_count: int = 0
    urls: List[SwaggerUrl] = Field(default_factory=list)
