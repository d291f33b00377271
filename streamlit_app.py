"""Streamlit front-end for the NameForge project."""

from __future__ import annotations

import streamlit as st

from name_forge.app.app import NameForgeApp
from name_forge.app.services.result_formatter import NameResultFormatter, gender_text
from name_forge.core import NameForgeError, NameGenOptions
from name_forge.utils.logging_config import configure_logging


@st.cache_resource(show_spinner=False)
def _load_app() -> NameForgeApp:
    """Initialise and cache the application facade."""

    configure_logging()
    return NameForgeApp()


def main() -> None:
    st.set_page_config(page_title="NameForge - Troll Name Generator", layout="wide")
    app = _load_app()
    formatter = NameResultFormatter()

    st.title("Troll Name Generator")
    if st.button("Reload Data"):
        try:
            app.reload()
        except NameForgeError as exc:
            st.error(f"Reload failed: {exc}")
    st.caption(formatter.format_summary(app.summary()))

    with st.form("generation_settings"):
        length = st.slider("Length", min_value=1.0, max_value=4.0, value=1.0, step=0.1)
        amount = st.slider("Amount", min_value=1, max_value=50, value=10)
        gender_ratio = st.slider("Gender (female → male)", 0.0, 1.0, 0.5, 0.05)
        st.caption(gender_text(gender_ratio))
        omit_reserved = st.checkbox("Omit reserved (jin, fon, zul, zen)", value=True)
        submitted = st.form_submit_button("Generate Names")

    if not submitted:
        return

    options = NameGenOptions(
        length=length,
        amount=amount,
        gender_ratio=gender_ratio,
        omit_reserved=omit_reserved,
    )
    try:
        names = app.generate(options)
    except NameForgeError as exc:
        st.error(f"Generation failed: {exc}")
        return

    st.dataframe(formatter.as_rows(names), use_container_width=True)
    for name in names:
        with st.expander(name.display):
            st.markdown(formatter.format_details(name))


if __name__ == "__main__":
    main()
