"""사이드바 테넌트 선택을 공통으로 처리하는 모듈."""

from __future__ import annotations

import os

import streamlit as st

from lib.api_client import APIClient


def tenant_client() -> APIClient:
    # 사이드바에서 입력한 테넌트 ID로 API 클라이언트를 만든다.
    api_base_url = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
    tenant_id = st.sidebar.number_input("tenant_id", min_value=1, step=1, value=1, key="tenant_id")
    st.caption(f"API_BASE_URL = {api_base_url} / tenant_id = {int(tenant_id)}")
    return APIClient(api_base_url, tenant_id=int(tenant_id))
