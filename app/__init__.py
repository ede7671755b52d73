"""Streamlit front end for Route Sheet Viewer."""
