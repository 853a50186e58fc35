"""Interactive Streamlit editor for environment files."""

from __future__ import annotations

import os
from typing import List, Tuple

import pandas as pd
import streamlit as st

from envfile import EnvFile, EnvFileError

DEFAULT_ENV_PATH = os.getenv("ENVFILE_PATH", ".env")
COLUMNS = ["key", "value"]


def store_to_frame(env: EnvFile) -> pd.DataFrame:
    return pd.DataFrame(env.items(), columns=COLUMNS)


def frame_to_entries(frame: pd.DataFrame) -> List[Tuple[str, str]]:
    """Turn edited table rows back into entries, skipping rows without a key."""

    entries: List[Tuple[str, str]] = []
    for row in frame.fillna("").itertuples(index=False):
        key = str(row.key).strip()
        if not key:
            continue
        entries.append((key, str(row.value)))
    return entries


def _apply_entries(env: EnvFile, entries: List[Tuple[str, str]]) -> EnvFile:
    edited = EnvFile.from_bytes(b"", path=env.path)
    for key, value in entries:
        edited.update(key, value)
    return edited


def main() -> None:
    st.set_page_config(page_title="Environment File Editor", layout="wide")
    st.title("Environment File Editor")
    st.caption("Entries are always written back sorted by key, without comments or blank lines.")

    env_path = st.sidebar.text_input("Environment file", value=DEFAULT_ENV_PATH)
    if st.sidebar.button("Reload"):
        st.rerun()

    try:
        env = EnvFile(env_path)
    except EnvFileError as exc:
        st.error(str(exc))
        st.stop()

    st.sidebar.metric("Entries", len(env))

    edited_frame = st.data_editor(
        store_to_frame(env),
        num_rows="dynamic",
        use_container_width=True,
        key=f"editor_{env_path}",
    )
    edited = _apply_entries(env, frame_to_entries(edited_frame))

    st.subheader("Canonical rendering")
    st.code(edited.to_bytes().decode("utf-8"), language="bash")

    if edited.items() == env.items():
        st.info("No pending changes.")
        return

    if st.button("Write changes"):
        try:
            edited.write()
        except EnvFileError as exc:
            st.error(str(exc))
            return
        st.success(f"Wrote {len(edited)} entries to {env_path}")


if __name__ == "__main__":  # pragma: no cover - streamlit entrypoint
    main()
