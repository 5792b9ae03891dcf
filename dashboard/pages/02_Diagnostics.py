"""저장소 진단 실행 페이지."""

from __future__ import annotations

import streamlit as st

from lib.tenant import tenant_client


def main() -> None:
    st.header("저장소 진단")
    client = tenant_client()
    st.markdown("임시 폴더를 만들고 확인한 뒤 삭제합니다. 실제 프로젝트 폴더는 건드리지 않습니다.")

    if st.button("진단 실행"):
        try:
            report = client.run_diagnostics()
        except Exception as exc:
            st.error(str(exc))
            return

        if report.get("success"):
            st.success(f"모든 단계 통과: {report.get('base_path')}")
        else:
            st.warning(f"문제가 발견되었습니다: {report.get('base_path')}")

        for step in report.get("steps", []):
            label = "통과" if step.get("success") else "실패"
            with st.expander(f"[{label}] {step.get('name')} - {step.get('message')}"):
                st.json(step.get("details", {}))


if __name__ == "__main__":
    main()
