"""Presentation adapters: session glue and the streamlit dashboard."""
