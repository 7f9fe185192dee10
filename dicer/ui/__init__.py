"""Streamlit front-end for Dicer."""
