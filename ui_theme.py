import streamlit as st


def inject_global_css() -> None:
    """Base CSS shared by every page (dark mode, pills, table spacing)."""
    st.markdown(
        """
        <style>
        /* ============================
           Global layout and colors
        ============================ */
        .stApp {
            background-color: #111111;
            color: #f5f5f5;
        }

        div.block-container {
            max-width: 95vw;
            padding-left: 2rem;
            padding-right: 2rem;
            padding-top: 1.3rem;
            padding-bottom: 2.5rem;
        }

        @media (min-width: 1400px) {
            div.block-container {
                padding-left: 3rem;
                padding-right: 3rem;
            }
        }

        div.block-container > *:first-child {
            margin-top: 0.5rem;
        }

        section[data-testid="stSidebar"] {
            background-color: #181818 !important;
        }

        h1, h2, h3 {
            font-weight: 600;
        }

        div[data-testid="stMarkdownContainer"] a {
            color: #b50938 !important;
            text-decoration: none;
        }
        div[data-testid="stMarkdownContainer"] a:hover {
            text-decoration: underline;
        }

        .stButton > button { border-radius: 999px; }

        /* ============================
           Selection pills
        ============================ */
        .artic-pill {
            display: inline-block;
            padding: 4px 10px;
            border-radius: 999px;
            background-color: #262626;
            color: #f5f5f5;
            font-size: 0.85rem;
            margin-top: 0.35rem;
            margin-right: 0.4rem;
            margin-bottom: 0.6rem;
        }
        .artic-pill strong { color: #ff6f61; }

        /* ============================
           Page intro block
        ============================ */
        .page-intro-wrapper {
            margin-top: 0.5rem;
            margin-bottom: 1.1rem;
        }

        .page-intro-title {
            font-weight: 600;
            font-size: 1.0rem;
            margin-bottom: 0.4rem;
        }

        .page-intro-list {
            margin-top: 0;
            margin-bottom: 0;
            padding-left: 1.2rem;
        }

        /* ============================
           Footer
        ============================ */
        .artic-footer {
            margin-top: 2.5rem;
            padding-top: 0.75rem;
            border-top: 1px solid #262626;
            font-size: 0.8rem;
            color: #aaaaaa;
            text-align: center;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def pill_html(label: str, value) -> str:
    return f'<span class="artic-pill">{label}: <strong>{value}</strong></span>'


def show_page_intro(title: str, bullets: list[str]) -> None:
    """Standard intro block at the top of each page."""
    items_html = "".join(f"<li>{b}</li>" for b in bullets)
    st.markdown(
        f"""
        <div class="page-intro-wrapper">
            <p class="page-intro-title">{title}</p>
            <ul class="page-intro-list">
                {items_html}
            </ul>
        </div>
        """,
        unsafe_allow_html=True,
    )


def show_global_footer() -> None:
    """Footer shown on every page."""
    st.markdown(
        """
        <div class="artic-footer">
            Art Institute Explorer, a prototype for browsing and selecting artworks.<br>
            Data provided by the Art Institute of Chicago public API.
        </div>
        """,
        unsafe_allow_html=True,
    )
