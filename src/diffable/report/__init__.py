from diffable.report.renderers import render, render_json, render_markdown, render_text, write_report

__all__ = ["render", "render_json", "render_markdown", "render_text", "write_report"]
