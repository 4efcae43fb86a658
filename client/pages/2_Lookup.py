# client/pages/2_Lookup.py
import streamlit as st
import api as API
from components import show_json

st.title("📄 Lookup record")

record_id = st.text_input("Title", placeholder="e.g., Ocean Survey 2019")
if st.button("Fetch record", key="btn_fetch_record") and record_id:
    try:
        item = API.record(record_id)["item"]
        raw = item.pop("raw", {})
        show_json(item, caption="Normalized")
        show_json(raw, caption="Source fields")
    except Exception as e:
        st.error(e)
