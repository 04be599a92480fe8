"""Dashboard package namespace.

This package contains the Streamlit overview page and its components. Chart
renderers return matplotlib figures built from pre-shaped data, so they can
be embedded in Streamlit or saved on their own.
"""
