"""
HTML rendering for the weather widget.

Rendering is a pure function of the widget state and the query text.
"""

import math
from html import escape
from typing import Union

from .config import ExternalAPIConfig, Messages
from .models import (
    ErrorState,
    IdleState,
    LoadingState,
    RequestState,
    SuccessState,
    WeatherSnapshot,
)

PAGE_TITLE = "Weather App"

_STYLE = """
body { margin: 0; font-family: system-ui, sans-serif; background: #dbeafe; }
main { display: flex; flex-direction: column; align-items: center; min-height: 100vh; padding: 2.5rem 0; }
section { width: 100%; max-width: 28rem; box-sizing: border-box; border-radius: 0.5rem; padding: 1.5rem; margin-bottom: 2rem; }
.widget { background: #fff; box-shadow: 0 1px 3px rgba(0, 0, 0, 0.15); }
.contact { background: #eff6ff; border: 1px solid #bfdbfe; text-align: center; }
h1 { text-align: center; color: #1d4ed8; font-weight: 800; margin-top: 0; }
h2 { color: #1d4ed8; font-size: 1.125rem; margin-top: 0; }
form { display: flex; gap: 0.5rem; margin-bottom: 1rem; }
input { flex: 1; border: 1px solid #d1d5db; border-radius: 0.25rem; padding: 0.5rem 0.75rem; color: #4b5563; }
button { background: #3b82f6; color: #fff; border: 0; border-radius: 0.25rem; font-weight: 600; padding: 0.5rem 1rem; }
button:disabled { opacity: 0.6; }
.result { min-height: 120px; display: flex; flex-direction: column; align-items: center; justify-content: center; }
.loading { color: #1d4ed8; font-weight: 500; }
.error { color: #ef4444; font-weight: 500; }
.idle { color: #9ca3af; text-align: center; padding: 1rem 0; }
.card { background: #eff6ff; border-radius: 0.75rem; padding: 1rem; width: 100%; box-sizing: border-box; }
.card-header { display: flex; align-items: center; gap: 0.75rem; justify-content: center; }
.card-header img { width: 4rem; height: 4rem; }
.location { font-size: 1.125rem; font-weight: 700; color: #1e40af; }
.description { text-transform: capitalize; color: #2563eb; }
.readings { display: flex; justify-content: space-around; margin-top: 0.5rem; color: #1e3a8a; }
.contact a { font-family: monospace; color: #2563eb; word-break: break-word; }
"""


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def format_number(value: Union[int, float]) -> str:
    """Show a reading the way the upstream sent it, without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def icon_url(icon: str) -> str:
    return ExternalAPIConfig.OPENWEATHER_ICON_URL.format(icon=icon)


def render_snapshot(snapshot: WeatherSnapshot) -> str:
    condition = snapshot.primary_condition
    description = escape(condition.description)
    return (
        '<div class="card">'
        '<div class="card-header">'
        f'<img src="{escape(icon_url(condition.icon))}" alt="{description}">'
        "<div>"
        f'<span class="location">{escape(snapshot.name)}, {escape(snapshot.country)}</span>'
        f'<div class="description">{description}</div>'
        "</div>"
        "</div>"
        '<div class="readings">'
        f"<div><strong>Temp: </strong>{round_half_up(snapshot.temperature)}°C</div>"
        f"<div><strong>Humidity: </strong>{format_number(snapshot.humidity)}%</div>"
        f"<div><strong>Wind: </strong>{format_number(snapshot.wind_speed)} m/s</div>"
        "</div>"
        "</div>"
    )


def render_result(state: RequestState) -> str:
    """Render the result region: exactly one of loading, error, card or prompt."""
    if isinstance(state, LoadingState):
        return f'<div class="loading">{Messages.LOADING}</div>'
    if isinstance(state, ErrorState):
        return f'<div class="error" role="alert">{escape(state.message)}</div>'
    if isinstance(state, SuccessState):
        return render_snapshot(state.snapshot)
    if isinstance(state, IdleState):
        return f'<div class="idle">{escape(Messages.IDLE_PROMPT)}</div>'
    raise TypeError(f"Unknown request state: {state!r}")


def render_contact(contact_email: str) -> str:
    email = escape(contact_email)
    return (
        '<section class="contact">'
        "<h2>Interested in working together?</h2>"
        "<p>Contact me at:</p>"
        f'<a href="mailto:{email}">{email}</a>'
        "</section>"
    )


def render_page(state: RequestState, query: str, contact_email: str) -> str:
    """
    Render the full page.

    Args:
        state: Current widget state
        query: Current search text, echoed back into the input
        contact_email: Address for the contact block

    Returns:
        str: Complete HTML document
    """
    disabled = " disabled" if isinstance(state, LoadingState) else ""
    return (
        "<!DOCTYPE html>"
        '<html lang="en">'
        "<head>"
        '<meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{PAGE_TITLE}</title>"
        f"<style>{_STYLE}</style>"
        "</head>"
        "<body>"
        "<main>"
        '<section class="widget">'
        f"<h1>{PAGE_TITLE}</h1>"
        '<form method="get" action="/">'
        '<input type="text" name="city" placeholder="Enter city..." '
        f'value="{escape(query)}">'
        f'<button type="submit"{disabled}>Search</button>'
        "</form>"
        f'<div class="result">{render_result(state)}</div>'
        "</section>"
        f"{render_contact(contact_email)}"
        "</main>"
        "</body>"
        "</html>"
    )
