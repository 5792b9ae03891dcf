"""Streamlit 대시보드 진입점."""

from __future__ import annotations

import os

import streamlit as st


def main() -> None:
    # 기본 페이지 구성과 API URL 안내를 제공한다.
    st.set_page_config(page_title="FieldOps Storage Dashboard", layout="wide")
    st.title("FieldOps 저장소 대시보드")
    st.caption("테넌트별 프로젝트 폴더 경로를 설정하고 점검하기 위한 운영자용 Streamlit 대시보드입니다.")

    api_base_url = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
    st.info(f"API_BASE_URL = {api_base_url}")

    st.markdown(
        """
        - 좌측 사이드바의 페이지를 통해 기준 경로 설정, 진단 실행, 프로젝트 폴더 재시도를 진행합니다.
        - 모든 페이지는 사이드바에서 입력한 테넌트 ID를 사용합니다.
        - API 서버가 실행 중이어야 동작합니다.
        """
    )


if __name__ == "__main__":
    main()
