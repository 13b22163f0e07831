"""Streamlit app for the EU cloud sovereignty self-assessment."""
