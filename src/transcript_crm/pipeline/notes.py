"""
Call note formatting.

HubSpot renders note bodies as HTML, so the note is a flat string of
<br>-separated lines. Interpolated text is HTML-escaped rather than inserted
raw, so a summary mentioning "Q&A" is stored as "Q&amp;A" and renders unchanged.
"""

from html import escape

from ..models.extraction import ExtractedData


def _text(value: str) -> str:
    return escape(value, quote=False)


def build_call_note(extracted: ExtractedData) -> str:
    """
    Render the call note attached to every synced contact and the deal.

    Pure and deterministic: the same ExtractedData always yields the same string.
    """
    parts: list[str] = []

    date = extracted.meeting_date or 'Unknown date'
    parts.append(f"📞 <b>Call Summary ({_text(date)})</b><br>")
    if extracted.meeting_title:
        parts.append(f"<b>Meeting:</b> {_text(extracted.meeting_title)}<br>")
    parts.append('<br>')
    parts.append(f"{_text(extracted.call_summary)}<br>")

    if extracted.action_items:
        parts.append('<br>')
        parts.append('📋 <b>Action Items:</b><br>')
        parts.extend(f"• {_text(item)}<br>" for item in extracted.action_items)

    if extracted.next_steps:
        parts.append('<br>')
        parts.append('➡️ <b>Next Steps:</b><br>')
        parts.extend(f"• {_text(step)}<br>" for step in extracted.next_steps)

    parts.append('<br>')
    parts.append(f"<b>Sentiment:</b> {extracted.sentiment.value}")

    if extracted.deal.notes:
        parts.append('<br><br>')
        parts.append(f"<b>Deal Notes:</b> {_text(extracted.deal.notes)}")

    return ''.join(parts)
