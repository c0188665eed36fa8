"""Plain-text rendering of directory conversion results."""

from __future__ import annotations

from .models import ConversionResult


def format_report(result: ConversionResult) -> str:
    """Render ``result`` as the multi-line summary returned to callers."""

    lines = [
        f"Converted {result.success_count} files, "
        f"failed {result.fail_count}.",
        "",
        "success:",
    ]
    lines.extend(str(path) for path in result.converted_files)
    lines.append("")
    lines.append("failed:")
    lines.extend(
        f"{path}: {message}" for path, message in result.failed_files.items()
    )
    return "\n".join(lines) + "\n"


__all__ = ["format_report"]
