"""
Listing option models and alias canonicalization.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..utils.exceptions import ConfigurationError

# Every accepted option key mapped to its canonical field.
OPTION_ALIASES: dict[str, str] = {
    # Directories only ("no files" is the same condition)
    "only_directories": "only_directories",
    "only_folder": "only_directories",
    "only_folders": "only_directories",
    "only_dir": "only_directories",
    "only_dirs": "only_directories",
    "no_files": "only_directories",
    "onlyDirectories": "only_directories",
    "onlyFolder": "only_directories",
    "onlyFolders": "only_directories",
    "onlyDir": "only_directories",
    "onlyDirs": "only_directories",
    "noFiles": "only_directories",
    # Files only
    "only_files": "only_files",
    "onlyFiles": "only_files",
    # Directories omitted from output, still descended into
    "exclude_directories": "exclude_directories",
    "no_dir": "exclude_directories",
    "no_dirs": "exclude_directories",
    "no_directories": "exclude_directories",
    "no_folder": "exclude_directories",
    "no_folders": "exclude_directories",
    "excludeDirectories": "exclude_directories",
    "noDir": "exclude_directories",
    "noDirs": "exclude_directories",
    "noDirectories": "exclude_directories",
    "noFolder": "exclude_directories",
    "noFolders": "exclude_directories",
    # Hidden entries
    "exclude_hidden": "exclude_hidden",
    "exclude_hidden_files": "exclude_hidden",
    "no_hidden": "exclude_hidden",
    "no_hidden_files": "exclude_hidden",
    "excludeHidden": "exclude_hidden",
    "excludeHiddenFiles": "exclude_hidden",
    "noHidden": "exclude_hidden",
    "noHiddenFiles": "exclude_hidden",
    # Extension
    "extension": "extension",
    "ext": "extension",
    # Root-relative output
    "strip_path": "strip_path",
    "no_path": "strip_path",
    "stripPath": "strip_path",
    "noPath": "strip_path",
    # Name-ordered output
    "sort": "sort",
}

VALUE_FIELDS = frozenset({"extension"})

# Option values that count as false besides Python's own falsy values.
FALSE_STRINGS = frozenset({"", "0"})


def flag_value(value: Any) -> bool:
    """Read an option flag the way a loosely typed key/value bag means it."""
    if isinstance(value, str):
        return value not in FALSE_STRINGS
    return bool(value)


def canonicalize_options(
    raw: Mapping[str, Any], keep_empty: bool = False
) -> dict[str, Any]:
    """
    Map option keys and their synonyms onto canonical field names.

    Unknown keys are dropped. Flags are read with :func:`flag_value`, so the
    strings ``"0"`` and ``""`` are false, and a flag reached through several
    synonyms is set when any of them is true. For the extension, the first
    non-empty value wins; with ``keep_empty`` an empty or ``None`` extension is
    kept as ``None`` so it can clear an earlier value.
    """
    canonical: dict[str, Any] = {}
    for key, value in raw.items():
        field = OPTION_ALIASES.get(key)
        if field is None:
            continue
        if field in VALUE_FIELDS:
            if value is None or value == "":
                if keep_empty and field not in canonical:
                    canonical[field] = None
            elif canonical.get(field) is None:
                canonical[field] = value
        else:
            canonical[field] = bool(canonical.get(field)) or flag_value(value)
    return canonical


class ListOptions(BaseModel):
    """Normalized, immutable options for one listing call."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    only_files: bool = Field(default=False, description="Emit files only")
    only_directories: bool = Field(
        default=False, description="Emit directories only"
    )
    exclude_directories: bool = Field(
        default=False,
        description="Omit directories from output (descent is unaffected)",
    )
    exclude_hidden: bool = Field(
        default=False, description="Omit entries whose name starts with a dot"
    )
    extension: Optional[str] = Field(
        default=None, description="Keep only names ending in '.<extension>'"
    )
    strip_path: bool = Field(
        default=False, description="Return root-relative paths"
    )
    sort: bool = Field(default=False, description="Sort entries by name")

    @model_validator(mode="before")
    @classmethod
    def canonicalize_keys(cls, data: Any) -> Any:
        """Resolve option synonyms before field validation."""
        if isinstance(data, Mapping):
            return canonicalize_options(data)
        return data

    @field_validator("extension", mode="before")
    @classmethod
    def normalize_extension(cls, v):
        """Drop a leading dot and lowercase the extension."""
        if v is None:
            return None
        if not isinstance(v, str):
            raise ConfigurationError(
                "Extension must be a string", config_field="extension", config_value=v
            )
        v = v.strip().lstrip(".").lower()
        return v or None

    @classmethod
    def from_mapping(
        cls, mapping: Optional[Mapping[str, Any]] = None, **overrides: Any
    ) -> "ListOptions":
        """Build options from a key/value bag, with keyword overrides on top."""
        raw = canonicalize_options(mapping or {})
        raw.update(canonicalize_options(overrides, keep_empty=True))
        return cls.model_validate(raw)

    @classmethod
    def coerce(
        cls,
        options: Optional[Union["ListOptions", Mapping[str, Any]]] = None,
        **overrides: Any,
    ) -> "ListOptions":
        """Accept a ListOptions, a mapping or nothing, plus keyword overrides."""
        if isinstance(options, ListOptions):
            if not overrides:
                return options
            return cls.from_mapping(options.model_dump(), **overrides)
        if options is not None and not isinstance(options, Mapping):
            raise ConfigurationError(
                "Options must be a mapping or ListOptions",
                config_field="options",
                config_value=type(options).__name__,
            )
        return cls.from_mapping(options, **overrides)

    @property
    def has_extension_filter(self) -> bool:
        return self.extension is not None

    def stripped(self) -> "ListOptions":
        """Copy of these options with root-relative output forced on."""
        return self.model_copy(update={"strip_path": True})
