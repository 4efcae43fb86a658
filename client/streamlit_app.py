# client/streamlit_app.py
import streamlit as st
import api as API

st.set_page_config(page_title="Metadata Catalog", layout="wide")
st.title("🗂️ Metadata Catalog")

st.markdown("""
Search a catalog of data resources whose source records use inconsistent field names.
Every record is normalized once when the API starts.

Use the **sidebar Pages** to open:
- **🔎 Browse** — Search the catalog, filter by category and time period, and switch between card and table views.
- **📄 Lookup** — Fetch a single record by title and inspect both its normalized and source fields.
""")

with st.sidebar:
    st.header("Settings")
    st.text_input("API Base URL (from env)", value=API.API, disabled=True)

try:
    health = API.healthz()
    facets = API.facets()
except Exception as e:
    st.error(f"API unreachable at {API.API}: {e}")
    st.stop()

if health.get("load_error"):
    st.warning(f"Catalog data could not be loaded from `{health['data_path']}`: {health['load_error']}")

c1, c2, c3 = st.columns(3)
c1.metric("Records", health["records"])
c2.metric("Categories", len(facets["categories"]))
c3.metric("Time periods", len(facets["time_periods"]))

st.info("Tip: set `API_BASE_URL` in `client/.env` or export it before running `./run_client.sh`.")
