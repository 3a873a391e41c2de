import html

import streamlit as st

PRIMARY_ACCENT = "#2563EB"  # blue-600
CARD_BORDER = "#e0e0e0"
CHIP_BG = "#eef2ff"
MUTED = "#6b7280"


def inject_base_css():
    st.markdown(
        f"""
        <style>
        .topbar-title {{
            text-align:center; font-size:1.35rem; font-weight:700; margin:0.2rem 0 0.6rem;
        }}
        .category-chip {{
            display:inline-block; padding:2px 10px; border-radius:12px;
            font-size:12px; line-height:18px; font-weight:600;
            background:{CHIP_BG}; color:{PRIMARY_ACCENT}; margin-bottom:6px;
        }}
        .card-subtitle {{color:{MUTED}; font-size:0.9rem; margin:0;}}
        .welcome {{text-align:center; padding:1.5rem 0 0.5rem;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def category_chip(category: str) -> str:
    return f'<span class="category-chip">{html.escape(category)}</span>'
