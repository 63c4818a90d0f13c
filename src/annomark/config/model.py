# topmark:header:start
#
#   project      : AnnoMark
#   file         : model.py
#   file_relpath : src/annomark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot passed to the parser and injector.
    - `MutableConfig`: a mutable builder used while merging configuration
      layers; it can be frozen into `Config` and thawed back for edits.

Merge order (lowest to highest precedence):
    1) runtime defaults,
    2) project files discovered upward from the anchor directory, root-most
       first; within a directory ``pyproject.toml`` (``[tool.annomark]``)
       before ``annomark.toml``,
    3) files passed explicitly (CLI ``--config``), in the given order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from annomark.config.io import (
    get_str_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from annomark.config.keys import Toml
from annomark.config.logging import get_logger
from annomark.constants import (
    ANNOMARK_TOML_NAME,
    DEFAULT_MULTIPLE_FIELD,
    DEFAULT_SINGLE_FIELD,
    PYPROJECT_TOML_NAME,
)
from annomark.core.casing import DEFAULT_CONVENTIONS, Convention
from annomark.core.errors import AnnomarkConfigError

if TYPE_CHECKING:
    from annomark.config.io import TomlTable
    from annomark.config.logging import AnnomarkLogger

logger: AnnomarkLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for AnnoMark.

    Attributes:
        single_field (str): Key a lone scalar payload is filed under when the
            destination has several fields (default ``"value"``).
        multiple_field (str): Key an accumulated list payload is filed under when
            the destination has several fields (default ``"values"``).
        conventions (tuple[Convention, ...]): Case conventions tried, in order, after
            the exact field name when matching property keys.
        config_files (tuple[str, ...]): Config sources merged into this snapshot.
    """

    single_field: str = DEFAULT_SINGLE_FIELD
    multiple_field: str = DEFAULT_MULTIPLE_FIELD
    conventions: tuple[Convention, ...] = DEFAULT_CONVENTIONS
    config_files: tuple[str, ...] = ()

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the runtime defaults as a frozen `Config`."""
        return MutableConfig.from_defaults().freeze()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            single_field=self.single_field,
            multiple_field=self.multiple_field,
            conventions=[c.value for c in self.conventions],
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-shaped dict."""
        return {
            Toml.SECTION_INJECTOR: {
                Toml.KEY_SINGLE_FIELD: self.single_field,
                Toml.KEY_MULTIPLE_FIELD: self.multiple_field,
                Toml.KEY_CONVENTIONS: [c.value for c in self.conventions],
            },
        }

    def to_toml(self) -> str:
        """Render this configuration as TOML text."""
        return to_toml(self.to_toml_dict())


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while merging layers.

    ``None`` means "not set by this layer"; `merge_with` only overrides the
    values the other layer sets.

    Attributes:
        single_field (str | None): See `Config.single_field`.
        multiple_field (str | None): See `Config.multiple_field`.
        conventions (list[str] | None): Convention names, validated on `freeze`.
        config_files (list[str]): Config sources merged so far.
    """

    single_field: str | None = None
    multiple_field: str | None = None
    conventions: list[str] | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate and freeze this builder into an immutable `Config`.

        Raises:
            AnnomarkConfigError: If a slot name is empty or a convention is unknown.
        """
        single_field = self.single_field if self.single_field is not None else DEFAULT_SINGLE_FIELD
        multiple_field = (
            self.multiple_field if self.multiple_field is not None else DEFAULT_MULTIPLE_FIELD
        )
        if not single_field.strip():
            raise AnnomarkConfigError(f"'{Toml.KEY_SINGLE_FIELD}' must not be empty.")
        if not multiple_field.strip():
            raise AnnomarkConfigError(f"'{Toml.KEY_MULTIPLE_FIELD}' must not be empty.")

        conventions: tuple[Convention, ...] = DEFAULT_CONVENTIONS
        if self.conventions is not None:
            try:
                conventions = tuple(Convention.parse(name) for name in self.conventions)
            except ValueError as exc:
                raise AnnomarkConfigError(str(exc)) from exc

        return Config(
            single_field=single_field,
            multiple_field=multiple_field,
            conventions=conventions,
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder with ``other`` layered on top of ``self``."""
        return MutableConfig(
            single_field=(
                other.single_field if other.single_field is not None else self.single_field
            ),
            multiple_field=(
                other.multiple_field if other.multiple_field is not None else self.multiple_field
            ),
            conventions=(
                list(other.conventions) if other.conventions is not None else self.conventions
            ),
            config_files=[*self.config_files, *other.config_files],
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a builder from a parsed TOML dict.

        Args:
            data (TomlTable): The parsed TOML data (``annomark.toml`` layout).
            config_file (Path | None): Source file, recorded in ``config_files``.

        Returns:
            MutableConfig: The resulting builder; unknown keys are ignored.
        """
        injector_tbl: TomlTable = get_table_value(data, Toml.SECTION_INJECTOR)
        logger.trace("TOML [%s]: %s", Toml.SECTION_INJECTOR, injector_tbl)

        return cls(
            single_field=get_string_value_or_none(injector_tbl, Toml.KEY_SINGLE_FIELD),
            multiple_field=get_string_value_or_none(injector_tbl, Toml.KEY_MULTIPLE_FIELD),
            conventions=get_str_list_or_none(injector_tbl, Toml.KEY_CONVENTIONS),
            config_files=[str(config_file)] if config_file else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        ``pyproject.toml`` files contribute their ``[tool.annomark]`` table only.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The builder, or None when ``path`` is a
                ``pyproject.toml`` without an ``[tool.annomark]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(get_table_value(toml_data, "tool"), "annomark")
            if not tool_section:
                logger.debug("No [tool.annomark] section in %s", path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``, root-most first.

        Within one directory ``pyproject.toml`` comes before ``annomark.toml`` so
        the latter wins on merge.
        """
        found: list[Path] = []
        current: Path = start.resolve()
        for directory in (current, *current.parents):
            for name in (ANNOMARK_TOML_NAME, PYPROJECT_TOML_NAME):
                candidate = directory / name
                if candidate.is_file():
                    found.append(candidate)
        found.reverse()
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a builder.

        Args:
            anchor (Path | None): Discovery start; CWD when None. A file anchor
                starts from its parent directory.
            extra_config_files (Iterable[Path] | None): Explicit files merged last.
            no_config (bool): Skip project discovery.

        Returns:
            MutableConfig: The merged builder, ready to `freeze`.
        """
        draft: MutableConfig = cls.from_defaults()

        start: Path = anchor if anchor is not None else Path.cwd()
        if start.is_file():
            start = start.parent

        paths: list[Path] = [] if no_config else cls.discover_local_config_files(start)
        paths.extend(extra_config_files or ())

        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)

        logger.debug("Merged configuration: %s", draft)
        return draft
