from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

import yaml

from csv2openapi.errors import OutputWriteError
from csv2openapi.openapi.build import document_to_dict
from csv2openapi.openapi.models import OpenAPIDocument

logger = logging.getLogger("csv2openapi")

FORMAT_EXTENSIONS = {
    "yaml": "yaml",
    "json": "json",
}


def render_document(doc: OpenAPIDocument, fmt: str = "yaml") -> str:
    """Serialize a document; identical documents give identical text."""
    data = document_to_dict(doc)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unsupported output format: {fmt!r}")


def output_path_for(item_name: str, fmt: str = "yaml", outdir: Union[str, Path] = ".") -> Path:
    if fmt not in FORMAT_EXTENSIONS:
        raise ValueError(f"Unsupported output format: {fmt!r}")
    return Path(outdir) / f"{item_name}.{FORMAT_EXTENSIONS[fmt]}"


def write_document(
    doc: OpenAPIDocument,
    item_name: str,
    *,
    fmt: str = "yaml",
    outdir: Union[str, Path] = ".",
    dry_run: bool = False,
) -> Union[Path, str]:
    """
    Write the rendered document to ``<outdir>/<item_name>.<ext>``.

    An existing file of that name is overwritten. With ``dry_run`` nothing
    is written and the rendered text is returned instead of the path.
    """
    text = render_document(doc, fmt)
    if dry_run:
        return text

    path = output_path_for(item_name, fmt, outdir)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"{path}: cannot write output ({e.strerror or e})") from e

    logger.debug("wrote %d bytes to %s", len(text.encode("utf-8")), path)
    return path
