"""Advisor Chat page - general questions about the EU Cloud Sovereignty Framework."""

import asyncio
import sys
from pathlib import Path

import streamlit as st

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from sovereignty_app.state import initialize_state, get_gateway, get_language, get_state, set_state

from sovereignty_advisor.gateway import ChatMessage, record_chat_turn
from sovereignty_scorer.catalog import ui_strings


ROLE_AVATARS = {
    "user": "user",
    "bot": "assistant",
}


def main() -> None:
    st.set_page_config(
        page_title="Advisor Chat",
        page_icon=":speech_balloon:",
        layout="wide"
    )

    initialize_state()

    lang = get_language()
    ui = ui_strings(lang)

    st.title(ui.chat_title)

    messages: list[ChatMessage] = get_state('chat_messages') or []

    for message in messages:
        with st.chat_message(ROLE_AVATARS[message.role]):
            st.markdown(message.text)

    prompt = st.chat_input(ui.chat_placeholder)
    if not prompt:
        return

    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner(ui.ai_consulting):
            outcome = asyncio.run(get_gateway().chat(prompt, messages, lang.value))
        if outcome.ok:
            st.markdown(outcome.value)
        else:
            st.error(outcome.error)

    set_state('chat_messages', record_chat_turn(messages, prompt, outcome))


main()
