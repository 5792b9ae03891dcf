"""프로젝트 생성/폴더 재시도 페이지."""

from __future__ import annotations

import streamlit as st

from lib.schemas import folder_summary, subdirectory_rows
from lib.tenant import tenant_client


def _show_folder(folder: dict) -> None:
    # success/warnings 조합에 따라 안내 수준을 다르게 보여준다.
    message = folder_summary(folder)
    if not folder.get("success"):
        st.error(message)
    elif folder.get("warnings"):
        st.warning(message)
        for warning in folder.get("warnings", []):
            st.write(f"- {warning}")
    else:
        st.success(message)
    st.caption(folder.get("path") or "")
    st.dataframe(subdirectory_rows(folder), use_container_width=True)


def main() -> None:
    st.header("프로젝트 폴더")
    client = tenant_client()

    st.subheader("프로젝트 생성")
    with st.form("create_project"):
        project_number = st.text_input("project_number", value="02-2026-0019")
        project_name = st.text_input("project_name", value="demo-project")
        submitted = st.form_submit_button("생성")

    if submitted:
        try:
            result = client.create_project(project_number, project_name)
            st.success(f"프로젝트 생성 완료: id={result['project'].get('id')}")
            _show_folder(result.get("folder", {}))
        except Exception as exc:
            st.error(str(exc))

    st.subheader("폴더 재시도")
    project_id = st.number_input("project_id", min_value=1, step=1, value=1, key="retry_project_id")
    if st.button("재시도"):
        try:
            _show_folder(client.retry_project_folder(int(project_id)))
        except Exception as exc:
            st.error(str(exc))


if __name__ == "__main__":
    main()
