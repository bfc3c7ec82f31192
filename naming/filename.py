"""Deterministic report filenames built from a tagging scheme.

A name is the project name, an optional data type, and one
``tag<tag_delimiter>value`` component per key, all joined by the component
delimiter, e.g. ``proj1_data_mk.parker-like_an.variant4``.
"""

from collections.abc import Mapping
from typing import Optional

from utils.constants import (
    DEFAULT_COMPONENT_DELIMITER,
    DEFAULT_TAG_DELIMITER,
    SOURCE_EXTENSION,
)


class NamingError(ValueError):
    """Raised when tags and values do not describe the same components."""

    pass


def build_name(
    project_name: str,
    tags: Mapping[str, str],
    values: Mapping[str, str],
    tag_delimiter: str = DEFAULT_TAG_DELIMITER,
    component_delimiter: str = DEFAULT_COMPONENT_DELIMITER,
    data_type: Optional[str] = None,
) -> str:
    """Build a filename (without extension) from a tagging scheme.

    Args:
        project_name: Project name; the filename starts with it
        tags: Ordered mapping of component key -> short tag
        values: Ordered mapping of component key -> value, same keys and order as ``tags``
        tag_delimiter: Separator between a tag and its value
        component_delimiter: Separator between components
        data_type: Optional data type inserted right after the project name

    Returns:
        Filename without extension

    Raises:
        NamingError: If ``tags`` and ``values`` keys differ in content or order
    """
    tag_keys = list(tags)
    value_keys = list(values)
    if tag_keys != value_keys:
        raise NamingError(
            f"tags and values must share keys and ordering: tags={tag_keys}, values={value_keys}"
        )

    parts = [project_name]
    if data_type:
        parts.append(data_type)
    parts.extend(f"{tags[key]}{tag_delimiter}{values[key]}" for key in tag_keys)
    return component_delimiter.join(parts)


def source_filename(name: str) -> str:
    """Filename of the editable source document for ``name``."""
    return f"{name}{SOURCE_EXTENSION}"


def dated_filename(base_name: str, date_str: str, extension: str) -> str:
    """Filename of a rendered artifact: ``{base_name}_{date}.{ext}``."""
    return f"{base_name}_{date_str}.{extension.lstrip('.')}"
