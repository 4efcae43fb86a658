# client/components.py
import streamlit as st
import pandas as pd

def show_table(rows, caption: str | None = None):
    """Render table-view rows; link cells become clickable columns."""
    if caption:
        st.caption(caption)
    if not rows:
        st.write(rows)
        return
    df = pd.DataFrame(rows)
    if "Link" in df.columns:
        df["Link"] = df["Link"].map(lambda l: l["href"] if l else None)
    st.dataframe(
        df,
        use_container_width=True,
        hide_index=True,
        column_config={"Link": st.column_config.LinkColumn("Link", display_text="Open")},
    )

def show_cards(cards, per_row: int = 2):
    """Render card-view items in a grid of bordered containers."""
    for i in range(0, len(cards), per_row):
        cols = st.columns(per_row)
        for col, c in zip(cols, cards[i:i + per_row]):
            with col.container(border=True):
                st.subheader(c["title"])
                if c.get("badges"):
                    st.markdown(" ".join(f"`{b}`" for b in c["badges"]))
                if c.get("citation"):
                    st.caption(c["citation"])
                if c.get("description"):
                    st.write(c["description"])
                for line in c.get("meta", []):
                    st.text(line)
                if c.get("link"):
                    st.link_button(c["link"]["label"], c["link"]["href"])

def show_json(obj, caption: str | None = None):
    if caption:
        st.caption(caption)
    st.json(obj)
