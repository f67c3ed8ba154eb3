# leaderboard_app.py
from __future__ import annotations

import logging

import streamlit as st

from config import load_leaderboard_config
from entries_loading import LeaderboardLoadError, load_entries
from leaderboard_logic import LeaderboardView, build_leaderboard
from rendering import (
    DEFAULT_TITLE,
    EMPTY_FEED,
    EMPTY_LEADERBOARD,
    LOAD_FAILED_FEED,
    LOAD_FAILED_LEADERBOARD,
    feed_item,
    leaderboard_frame,
    meta_labels,
    recent_feed_frame,
    stat_labels,
)


def render(view: LeaderboardView) -> None:
    """Draw the metadata, stats, ranking table and recent feed of *view*."""
    meta = meta_labels(view)
    st.title(f"🛡️ {meta['title']}")
    st.caption(f"Season: {meta['season']} · Last updated: {meta['last_updated']}")

    stats = stat_labels(view)
    col1, col2, col3 = st.columns(3)
    col1.metric("Students", stats["students"])
    col2.metric("Findings", stats["findings"])
    col3.metric("Points", stats["points"])

    st.subheader("Leaderboard")
    board = leaderboard_frame(view.students)
    if board.empty:
        st.info(EMPTY_LEADERBOARD)
    else:
        st.dataframe(board, use_container_width=True, hide_index=True)
        st.download_button(
            "⬇️ Download CSV (Leaderboard)",
            data=board.to_csv(index=False).encode("utf-8"),
            file_name="leaderboard.csv",
            mime="text/csv",
        )

    st.subheader("Recent findings")
    if not view.recent:
        st.info(EMPTY_FEED)
        return

    for finding in view.recent:
        item = feed_item(finding)
        with st.container(border=True):
            left, right = st.columns([4, 1])
            left.markdown(f"**{item['title']}**")
            right.markdown(f"`{item['points']}`")
            st.caption(item["meta"])
            if item["url"]:
                st.link_button("View reference", item["url"])

    with st.expander("Recent findings table"):
        st.dataframe(recent_feed_frame(view.recent), use_container_width=True, hide_index=True)


def render_error() -> None:
    st.title(f"🛡️ {DEFAULT_TITLE}")
    st.subheader("Leaderboard")
    st.error(LOAD_FAILED_LEADERBOARD)
    st.subheader("Recent findings")
    st.error(LOAD_FAILED_FEED)


def main() -> None:
    st.set_page_config(page_title="Security Leaderboard", page_icon="🛡️", layout="wide")
    config = load_leaderboard_config()

    if st.button("🔄 Refresh"):
        st.rerun()

    try:
        data = load_entries(config["ENTRIES_SOURCE"], timeout=config["REQUEST_TIMEOUT"])
        view = build_leaderboard(data, recent_limit=config["RECENT_LIMIT"])
    except (LeaderboardLoadError, ValueError):
        logging.exception("Leaderboard run aborted")
        render_error()
        return

    render(view)


if __name__ == "__main__":
    main()
