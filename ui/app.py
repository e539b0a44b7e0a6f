"""
Trip Partner Finder UI

A Streamlit application that lists candidate travel partners with their
compatibility score against the current traveler.

Views:
- Match Finder: one card per candidate with score and shared destinations
- Saved Trips / Following: session placeholders (nothing is persisted)
- Predictive Suggestions: static tips

Run with: streamlit run ui/app.py
"""

import html
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import streamlit as st

from tripmatch.configs import load_config
from tripmatch.data_loading import load_profiles
from tripmatch.scoring import ScoringConfig, compute_compatibility

# =============================================================================
# CONSTANTS
# =============================================================================

CONFIG_PATH = project_root / "configs" / "config.yaml"
PROFILES_PATH = project_root / "data" / "sample_travelers.yaml"

VIEWS = {
    "match": "Match Finder",
    "saved": "Saved Trips",
    "following": "Following",
    "suggestions": "Predictive Suggestions",
}

SUGGESTIONS = [
    'Add "Udaipur" to your wishlist for more matches.',
    "Shift your trip by +2 days to increase compatibility.",
]

COLORS = {
    "background": "#F9FAFB",
    "card_bg": "#FFFFFF",
    "text_primary": "#1F2937",
    "text_secondary": "#6B7280",
    "accent": "#0F766E",
    "border": "#E5E7EB",
}


def inject_custom_css():
    """Inject card styles."""
    st.markdown(f"""
    <style>
        .stApp {{
            background-color: {COLORS['background']};
        }}

        .card {{
            background: {COLORS['card_bg']};
            border: 1px solid {COLORS['border']};
            border-radius: 12px;
            padding: 1rem;
            margin-bottom: 1rem;
        }}

        .card h3 {{
            color: {COLORS['text_primary']};
            margin: 0;
            font-size: 1.05rem;
        }}

        .card .muted {{
            color: {COLORS['text_secondary']};
            font-size: 0.8rem;
        }}

        .card .score {{
            color: {COLORS['accent']};
            font-weight: 600;
            font-size: 0.9rem;
        }}

        #MainMenu {{visibility: hidden;}}
        footer {{visibility: hidden;}}
    </style>
    """, unsafe_allow_html=True)


@st.cache_resource
def load_session_data():
    """Load and cache the profiles and scoring config for the session."""
    config = load_config(str(CONFIG_PATH)) if CONFIG_PATH.exists() else {}
    scoring_config = ScoringConfig.from_config(config)
    scoring_config.validate()

    collection = load_profiles(str(PROFILES_PATH))
    if collection.reference is None:
        st.error("Profile file has no reference traveler.")
        st.stop()
    return collection.reference, collection.travelers, scoring_config


def render_card(person, result):
    """Render one candidate card."""
    # Profile text is user-supplied; escape it before raw HTML rendering
    shared = html.escape(", ".join(result.common_destinations) or "None")
    st.markdown(f"""
    <div class="card">
        <h3>{html.escape(person.name or person.identifier)}</h3>
        <p class="muted">{html.escape(person.home_location)}</p>
        <p style="font-size: 0.9rem;">{html.escape(person.bio)}</p>
        <p class="muted">Destinations: {html.escape(", ".join(person.destinations))}</p>
        <p class="muted">Shared destinations: {shared}</p>
        <p class="score">Compatibility: {result.score}%</p>
    </div>
    """, unsafe_allow_html=True)


def render_match_view(reference, travelers, scoring_config):
    """Render the candidate grid in source order."""
    # Scores are recomputed on each rerun; profiles are static for the session
    enriched = [
        (person, compute_compatibility(reference, person, scoring_config))
        for person in travelers
        if person.identifier != reference.identifier
    ]

    columns = st.columns(2)
    for i, (person, result) in enumerate(enriched):
        with columns[i % 2]:
            render_card(person, result)


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title="Trip Partner Finder",
        page_icon="",
        layout="wide",
    )

    inject_custom_css()
    reference, travelers, scoring_config = load_session_data()

    st.title("Trip Partner Finder")

    if "view" not in st.session_state:
        st.session_state.view = "match"

    # Navigation buttons
    nav_columns = st.columns(len(VIEWS))
    for column, (key, label) in zip(nav_columns, VIEWS.items()):
        with column:
            if st.button(label, use_container_width=True,
                         type="primary" if st.session_state.view == key else "secondary"):
                st.session_state.view = key
                st.rerun()

    view = st.session_state.view
    if view == "match":
        render_match_view(reference, travelers, scoring_config)
    elif view == "saved":
        st.write("No saved trips yet.")
    elif view == "following":
        st.write("Not following anyone yet.")
    elif view == "suggestions":
        for tip in SUGGESTIONS:
            st.info(tip)


if __name__ == "__main__":
    main()
