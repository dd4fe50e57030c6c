"""Manifest writer - sets the new version in every manifest."""

import json
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pkgbump.errors import ManifestParseError, ManifestSchemaError
from pkgbump.models import ManifestRef

DEFAULT_INDENT = "  "

_INDENT_RE = re.compile(r"^([ \t]+)\S", re.MULTILINE)
_WS_RE = re.compile(r"[ \t\n\r]*")


@dataclass
class JsonFormat:
    """Whitespace conventions of an existing JSON file."""

    indent: str = DEFAULT_INDENT
    newline: str = "\n"
    trailing_newline: bool = True


@dataclass
class WriteResult:
    """Result of writing the new version to all manifests."""

    success: bool
    error: Optional[str] = None
    updated_paths: list[str] = field(default_factory=list)
    failed_path: Optional[str] = None


def detect_format(text: str) -> JsonFormat:
    """Work out indentation, line endings and trailing newline of text."""
    match = _INDENT_RE.search(text)
    return JsonFormat(
        indent=match.group(1) if match else DEFAULT_INDENT,
        newline="\r\n" if "\r\n" in text else "\n",
        trailing_newline=text.endswith("\n"),
    )


def render_json(data: dict[str, Any], fmt: JsonFormat) -> str:
    """Serialize data using the whitespace conventions in fmt."""
    content = json.dumps(data, indent=fmt.indent, ensure_ascii=False)
    if fmt.newline != "\n":
        content = content.replace("\n", fmt.newline)
    if fmt.trailing_newline:
        content += fmt.newline
    return content


def find_version_span(text: str) -> Optional[tuple[int, int]]:
    """Locate the top-level "version" string value in text.

    Returns the (start, end) offsets of the quoted value, or None when the
    document is not an object or has no top-level string version. With
    duplicate keys the last one wins, as it does for json.loads.
    """
    decoder = json.JSONDecoder()
    pos = _WS_RE.match(text).end()
    if text[pos : pos + 1] != "{":
        return None

    pos = _WS_RE.match(text, pos + 1).end()
    if text[pos : pos + 1] == "}":
        return None

    span: Optional[tuple[int, int]] = None
    while True:
        key, pos = decoder.raw_decode(text, pos)
        pos = _WS_RE.match(text, pos).end()
        if text[pos : pos + 1] != ":":
            return None

        start = _WS_RE.match(text, pos + 1).end()
        value, pos = decoder.raw_decode(text, start)
        if key == "version" and isinstance(value, str):
            span = (start, pos)

        pos = _WS_RE.match(text, pos).end()
        if text[pos : pos + 1] != ",":
            return span
        pos = _WS_RE.match(text, pos + 1).end()


def write_atomic(path: Path, content: str) -> None:
    """Write content to a sibling temp file, then move it over path.

    The permission bits of an existing path are carried over.
    """
    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if path.exists():
            shutil.copymode(path, tmp)
        tmp.replace(path)
    finally:
        if tmp.exists():
            tmp.unlink()


class ManifestWriter:
    """Applies a version to manifests with a read-modify-write cycle."""

    def update(self, path: Path, new_version: str) -> None:
        """Set the top-level version of the manifest at path.

        Only the version value is replaced in the original text, so every
        other byte stays as it was. A manifest without a top-level string
        version is re-rendered with its detected indentation and line endings.
        """
        try:
            text = path.read_text(encoding="utf-8")
            data = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ManifestParseError(f"{path} is not valid JSON: {e}", path) from e

        if not isinstance(data, dict):
            raise ManifestSchemaError(f"{path} must contain a JSON object", path)

        span = find_version_span(text)
        if span is not None:
            start, end = span
            value = json.dumps(new_version, ensure_ascii=False)
            content = text[:start] + value + text[end:]
        else:
            data["version"] = new_version
            content = render_json(data, detect_format(text))

        write_atomic(path, content)

    def write_all(self, manifests: list[ManifestRef], new_version: str) -> WriteResult:
        """Update every manifest in order, stopping at the first failure.

        Files written before a failure are not rolled back; they are listed in
        updated_paths so the caller can report the partial state.
        """
        result = WriteResult(success=True)

        for ref in manifests:
            try:
                self.update(ref.path, new_version)
            except (OSError, ManifestParseError, ManifestSchemaError) as e:
                result.success = False
                result.error = str(e)
                result.failed_path = str(ref.path)
                break
            result.updated_paths.append(str(ref.path))

        return result
