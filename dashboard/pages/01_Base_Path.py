"""테넌트 기준 경로 설정/상태 페이지."""

from __future__ import annotations

import streamlit as st

from lib.tenant import tenant_client


def main() -> None:
    st.header("기준 경로 설정")
    client = tenant_client()

    st.subheader("현재 상태")
    if st.button("상태 조회"):
        try:
            status = client.get_base_path_status()
            col1, col2, col3 = st.columns(3)
            col1.metric("설정 여부", "설정됨" if status.get("configured") else "기본 경로")
            col2.metric("쓰기 가능", "예" if status.get("writable") else "아니오")
            col3.metric("클라우드 동기화", "예" if status.get("cloud_synced") else "아니오")
            st.json(status)
        except Exception as exc:
            st.error(str(exc))

    st.subheader("경로 테스트 (저장하지 않음)")
    test_path = st.text_input("테스트할 경로", value="", key="test_path")
    if st.button("테스트"):
        try:
            st.json(client.test_base_path(test_path))
        except Exception as exc:
            st.error(str(exc))

    st.subheader("경로 저장")
    with st.form("set_base_path"):
        new_path = st.text_input("workflow_base_path (비우면 기본 경로 사용)", value="")
        submitted = st.form_submit_button("저장")

    if submitted:
        try:
            result = client.set_base_path(new_path.strip() or None)
            st.success(f"저장 완료: {result.get('path') or '기본 경로'}")
        except Exception as exc:
            st.error(str(exc))


if __name__ == "__main__":
    main()
