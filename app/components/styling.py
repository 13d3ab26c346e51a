import streamlit as st

from nobet.models.rules import ROW_STYLES


def apply_styling():
    """Apply global CSS styling based on the row styles."""
    css = "<style>\n"
    for kind, style in ROW_STYLES.items():
        css += f".row-{kind} {{ background-color: {style.color_bg} !important; color: {style.color_text}; }}\n"

    css += """
    .app-header { padding: 0.8rem 1rem; border-radius: 8px; background: #4338CA; color: white; margin-bottom: 1rem; }
    .app-header h1 { font-size: 1.4rem; margin: 0; color: white; }
    .app-header p { font-size: 0.8rem; margin: 0; opacity: 0.8; }
    .app-footer { text-align: center; color: #6B7280; font-size: 0.8rem; margin-top: 2rem; }

    /* Hide Streamlit deploy button */
    .stDeployButton { display: none !important; }
    </style>
    """

    st.markdown(css, unsafe_allow_html=True)
