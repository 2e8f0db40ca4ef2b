"""
Utility modules for the Streamlit frontend.

This package contains:
- state: Session catalog and recipe selection helpers
- options: Cuisine and diet choices offered by the filter selects
"""
