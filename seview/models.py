"""Pydantic models for transformer configuration."""

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .keypath import split_path


class TransformOptions(BaseModel):
    """Options accepted by ``make_transformer``."""

    class_key: str = Field(
        "class",
        alias="classKey",
        min_length=1,
        description=(
            "Attribute key holding the CSS class list, both for selector classes "
            "and for merging an explicit class value (e.g. className)."
        ),
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")


class RemapSpec(BaseModel):
    """Dotted source path to dotted destination path, as used by ``remap_keys``."""

    mappings: Dict[str, str] = Field(
        default_factory=dict,
        description="Map of 'from.path' to 'to.path' copied for every record.",
    )

    @field_validator("mappings")
    @classmethod
    def _check_paths(cls, value: Dict[str, str]) -> Dict[str, str]:
        for source, dest in value.items():
            for path in (source, dest):
                if not path or "" in split_path(path):
                    raise ValueError(f"invalid key path {path!r} in mapping {source!r} -> {dest!r}")
        return value

    def pairs(self) -> List[Tuple[List[str], List[str]]]:
        return [(split_path(source), split_path(dest)) for source, dest in self.mappings.items()]


__all__ = ["RemapSpec", "TransformOptions"]
