"""contact_scout.report: JSON and HTML writers for extraction records."""

from contact_scout.report.html_report import render_html
from contact_scout.report.json_report import render_json

__all__ = ["render_json", "render_html"]
