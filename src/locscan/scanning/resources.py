"""Load resource entries for building a ReferenceTrie.

Two sources are supported:

- .resx files, where every <data name="..."><value>...</value></data>
  string entry becomes one key of the generated class. The class is named
  after the file; a culture suffix (Strings.de-DE.resx) marks the file as
  a culture-specific override of Strings.resx.
- YAML or JSON entry lists for resources that do not live in .resx files:

    - namespace: MyApp.Properties
      class: Resources
      key: Greeting
      value: Hello
      culture: de-DE      # optional
      origin: path/to/Resources.de-DE.resx   # optional
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

import structlog
import yaml

from locscan.core.errors import ResourceError
from locscan.scanning.models import ResourceEntry, ResourceOrigin

logger = structlog.get_logger()

_CULTURE_PATTERN = re.compile(r"^[a-zA-Z]{2,3}(?:-[A-Za-z0-9]{2,8})*$")

_REQUIRED_FIELDS = ("class", "key", "value")


def _split_culture(path: Path) -> tuple[str, str | None]:
    stem = path.stem
    base, dot, suffix = stem.rpartition(".")
    if dot and base and _CULTURE_PATTERN.match(suffix):
        return base, suffix
    return stem, None


def parse_culture(path: str | Path) -> str | None:
    """Culture of a resource file: Strings.de-DE.resx -> "de-DE", Strings.resx -> None."""
    return _split_culture(Path(path))[1]


def load_resx(
    path: str | Path,
    namespace: str,
    class_name: str | None = None,
) -> list[ResourceEntry]:
    """String entries of a .resx file.

    Entries with a type or mimetype attribute hold non-string data
    (images, serialized objects) and are skipped.
    """
    resx_path = Path(path)
    if not resx_path.is_file():
        raise ResourceError.file_not_found(str(resx_path))

    try:
        tree = ET.parse(resx_path)
    except ET.ParseError as e:
        raise ResourceError.parse_error(str(resx_path), str(e)) from e

    base_name, culture = _split_culture(resx_path)
    origin = ResourceOrigin(
        namespace=namespace,
        class_name=class_name or base_name,
        culture=culture,
        path=str(resx_path),
    )

    entries: list[ResourceEntry] = []
    for data in tree.getroot().iter("data"):
        name = data.get("name")
        if not name or data.get("type") or data.get("mimetype"):
            continue
        value = data.findtext("value") or ""
        entries.append(ResourceEntry.from_origin(origin, name, value))

    logger.debug("resx_loaded", path=str(resx_path), entries=len(entries), culture=culture)
    return entries


def _read_list(path: Path) -> Any:
    content = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(content)
    return yaml.safe_load(content)


def load_entries(path: str | Path) -> list[ResourceEntry]:
    """Entries from a YAML or JSON list of {namespace, class, key, value} items."""
    list_path = Path(path)
    if not list_path.is_file():
        raise ResourceError.file_not_found(str(list_path))

    try:
        raw = _read_list(list_path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ResourceError.parse_error(str(list_path), str(e)) from e

    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ResourceError.parse_error(str(list_path), "expected a list of entries")

    origins: dict[tuple[str, str, str | None, str | None], ResourceOrigin] = {}
    entries: list[ResourceEntry] = []
    for number, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ResourceError.parse_error(str(list_path), f"entry {number} is not a mapping")
        missing = [name for name in _REQUIRED_FIELDS if item.get(name) is None]
        if missing:
            raise ResourceError.parse_error(
                str(list_path), f"entry {number} is missing {', '.join(missing)}"
            )
        namespace = str(item.get("namespace") or "")
        culture = item.get("culture") or None
        origin_path = item.get("origin")
        origin_key = (namespace, str(item["class"]), culture, origin_path)
        origin = origins.get(origin_key)
        if origin is None:
            origin = ResourceOrigin(namespace, str(item["class"]), culture, origin_path)
            origins[origin_key] = origin
        entries.append(ResourceEntry.from_origin(origin, str(item["key"]), str(item["value"])))
    return entries


def load_resource_file(path: str | Path, namespace: str | None = None) -> list[ResourceEntry]:
    """Entries from a .resx file or an entry list, chosen by extension."""
    resource_path = Path(path)
    if resource_path.suffix.lower() == ".resx":
        return load_resx(resource_path, namespace or "")
    return load_entries(resource_path)
