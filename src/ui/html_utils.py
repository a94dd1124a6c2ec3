"""Utilities for preparing HTML snippets before rendering in Streamlit."""
from html import escape
from textwrap import dedent

TYPE_BADGES = {
    "student": {"label": "Student", "icon": "🎓", "color": "#6366f1"},
    "professional": {"label": "Professional", "icon": "💼", "color": "#ec4899"},
}


def html_block(template: str) -> str:
    """
    Normalize multi-line HTML so Streamlit doesn't treat it as Markdown code.

    Streamlit's Markdown renderer interprets lines with >=4 leading spaces as
    code blocks, so every line is dedented and left-stripped.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def type_badge_html(registration_type: str) -> str:
    """Pill badge for a registration type; unknown types render in grey."""
    badge = TYPE_BADGES.get(registration_type)
    if badge is None:
        return f"<span class='type-badge' style='background: #94a3b8;'>{escape(registration_type or '?')}</span>"
    return (
        f"<span class='type-badge' style='background: {badge['color']};'>"
        f"{badge['icon']} {badge['label']}</span>"
    )


def stat_card_html(label: str, value: int, accent: str) -> str:
    """Dashboard statistic card."""
    return html_block(
        f"""
        <div class="stat-card" style="border-top: 4px solid {accent};">
            <div class="stat-value">{int(value)}</div>
            <div class="stat-label">{escape(label)}</div>
        </div>
        """
    )


def field_feedback_html(status: str, message: str = "") -> str:
    """
    Inline feedback under a form field.

    Args:
        status: "error", "valid" or anything else for no feedback
        message: Error text shown for "error"
    """
    if status == "error":
        return f"<div class='field-error'>⚠️ {escape(message)}</div>"
    if status == "valid":
        return "<div class='field-valid'>✓ Looks good</div>"
    return ""
