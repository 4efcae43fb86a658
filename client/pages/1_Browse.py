# client/pages/1_Browse.py
import streamlit as st
import api as API
from components import show_cards, show_table

st.title("🔎 Browse")

# Facets only change when the server reloads its data
@st.cache_data(ttl=300)
def _facets():
    return API.facets()

try:
    facets = _facets()
except Exception as e:
    st.error(e)
    st.stop()

c1, c2, c3 = st.columns([3, 2, 2])
with c1:
    q = st.text_input("Search", placeholder="title, description, keywords, custodian…", key="browse_q")
with c2:
    category = st.selectbox("Category", [""] + facets["categories"],
                            format_func=lambda v: v or "All categories", key="browse_category")
with c3:
    time_period = st.selectbox("Time period", [""] + facets["time_periods"],
                               format_func=lambda v: v or "All time periods", key="browse_period")

view = st.radio("View", ["cards", "table"], horizontal=True,
                format_func=str.capitalize, key="browse_view")

# Streamlit reruns this script on every widget change, so results are always current
try:
    res = API.search(q=q, category=category, time_period=time_period, view=view)
except Exception as e:
    st.error(e)
    st.stop()

st.caption(res["summary"])

if not res["items"]:
    st.info(res["empty_message"])
elif res["view"] == "table":
    show_table(res["items"])
else:
    show_cards(res["items"])
