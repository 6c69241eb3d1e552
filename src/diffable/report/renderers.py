from __future__ import annotations

import json
from pathlib import Path

from diffable.constants import REPORT_FORMATS, SCHEMA_VERSION
from diffable.engine import RunSummary


def render_text(summary: RunSummary) -> str:
    lines: list[str] = []
    for outcome in summary.outcomes:
        if outcome.error is not None:
            lines.append(f"ERROR {outcome.name}: [{outcome.error.code}] {outcome.error.message}")
        elif outcome.diverged:
            lines.append(f"DIVERGED {outcome.name}:")
            lines.append(outcome.result.render())
        else:
            lines.append(f"OK {outcome.name}")
    lines.append(
        f"{len(summary.outcomes)} checks, {len(summary.diverged)} diverged, {len(summary.errored)} errored"
    )
    return "\n".join(lines) + "\n"


def render_markdown(summary: RunSummary) -> str:
    lines: list[str] = []
    lines.append("## Diffable Report")
    lines.append("")
    if summary.errored:
        status = "Errors"
    elif summary.diverged:
        status = "Divergence detected"
    else:
        status = "No divergence"
    lines.append(f"- Status: **{status}**")
    lines.append(f"- Checks: **{len(summary.outcomes)}**")
    lines.append(f"- Diverged: **{len(summary.diverged)}**")
    lines.append(f"- Errored: **{len(summary.errored)}**")

    lines.append("")
    lines.append("### Checks")
    lines.append("")
    if not summary.outcomes:
        lines.append("No checks.")
    for outcome in summary.outcomes:
        if outcome.error is not None:
            lines.append(f"- `{outcome.name}`: error `{outcome.error.code}`: {outcome.error.message}")
        elif outcome.diverged:
            lines.append(f"- `{outcome.name}`: diverged")
            lines.append("")
            lines.append("```")
            lines.append(outcome.result.render())
            lines.append("```")
            lines.append("")
        else:
            lines.append(f"- `{outcome.name}`: ok")

    lines.append("")
    return "\n".join(lines)


def render_json(summary: RunSummary) -> str:
    payload = {"schema_version": SCHEMA_VERSION, **summary.to_dict()}
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def render(summary: RunSummary, fmt: str) -> str:
    if fmt == "text":
        return render_text(summary)
    if fmt == "markdown":
        return render_markdown(summary)
    if fmt == "json":
        return render_json(summary)
    raise ValueError(f"format must be one of {'|'.join(REPORT_FORMATS)}; got: {fmt}")


def write_report(summary: RunSummary, path: Path, fmt: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render(summary, fmt), encoding="utf-8")
