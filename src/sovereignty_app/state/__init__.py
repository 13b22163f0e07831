"""Session state management."""

from sovereignty_app.state.session_state import (
    initialize_state,
    get_state,
    set_state,
    clear_state,
    get_language,
    get_assessment,
    get_gateway,
    switch_language,
)

__all__ = [
    "initialize_state",
    "get_state",
    "set_state",
    "clear_state",
    "get_language",
    "get_assessment",
    "get_gateway",
    "switch_language",
]
