# app/streamlit_app.py
# Run: streamlit run app/streamlit_app.py
from __future__ import annotations
import logging
from typing import Any, Dict

import streamlit as st

from rowmat import APP_VERSION, CodecConfig, get_config, element_for, loads_matrix, dumps_matrix, shape
from rowmat.elements import ELEMENTS
from rowmat.logging_config import setup_logging

SAMPLE = "1 2 3\n4 5\n\n"


def parse_text(text: str, element_name: str = "int", strict: bool = True) -> Dict[str, Any]:
    """Parse ``text`` as a matrix and report what the codec saw."""
    cfg = get_config().model_copy(update={"strict_terminator": strict})
    element = element_for(element_name)
    M, stream = loads_matrix(text, element, config=cfg)
    return {
        "matrix": M,
        "shape": shape(M),
        "fail": stream.fail,
        "eof": stream.eof,
        "text": dumps_matrix(M, element, config=cfg),
    }


def main() -> None:
    st.set_page_config(page_title="rowmat playground", layout="wide")
    st.title("rowmat — matrix text playground")
    st.caption(f"Row/blank-line text codec with rectangularization ({APP_VERSION})")

    with st.sidebar:
        debug = st.checkbox("Debug log", False)
        st.markdown("### Codec")
        element_name = st.selectbox("Element type", sorted(ELEMENTS), index=sorted(ELEMENTS).index("int"))
        strict = st.checkbox("Require blank-line terminator", CodecConfig().strict_terminator)
    setup_logging(logging.DEBUG if debug else logging.INFO)

    text = st.text_area("Matrix text (rows, then a blank line)", SAMPLE, height=200)
    if not st.button("Parse"):
        st.info("Edit the text and press Parse.")
        st.stop()

    out = parse_text(text, element_name, strict)
    if out["fail"]:
        st.warning("Stream failed: the matrix below is a truncated read.")
    else:
        st.success("Parsed ✅")
    r, c = out["shape"]
    st.write(f"Shape: {r} x {c}")
    st.json(out["matrix"] if element_name in ("int", "float", "bool", "str") else [[str(v) for v in row] for row in out["matrix"]])
    st.code(out["text"], language="text")
    st.download_button("Download matrix.txt", out["text"], file_name="matrix.txt", mime="text/plain")


if __name__ == "__main__":
    main()
