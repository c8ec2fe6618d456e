"""
Streamlit UI: browse the most recent audit lines.

Run: streamlit run app.py
"""
import streamlit as st
from wordpane_audit.config import get_log_file, get_tail_default
from wordpane_audit.reader import tail

st.set_page_config(page_title="WordPane Audit", layout="wide")
st.title("WordPane Audit")
st.caption("User and content lifecycle events, newest at the bottom.")

log_path = get_log_file()
with st.sidebar:
    st.subheader("Log")
    st.code(str(log_path))
    n = st.slider("Lines", 5, 500, min(max(get_tail_default(), 5), 500))
    st.button("Refresh")

result = tail(log_path, n)
if not result.exists:
    st.warning(f"Audit log does not exist yet: {log_path}")
elif not result.lines:
    st.info("Audit log is empty.")
else:
    st.write(f"Showing **{len(result.lines)}** line(s).")
    st.code("\n".join(result.lines), language=None)
