"""API 호출을 담당하는 간단한 클라이언트."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests


@dataclass
class APIClient:
    base_url: str
    tenant_id: Optional[int] = None
    timeout: int = 15

    def _url(self, path: str) -> str:
        # 상대 경로를 API_BASE_URL에 결합한다.
        return f"{self.base_url.rstrip('/')}{path}"

    def _headers(self) -> Dict[str, str]:
        # 테넌트 범위 API는 X-Tenant-ID 헤더가 필요하다.
        if self.tenant_id is None:
            return {}
        return {"X-Tenant-ID": str(self.tenant_id)}

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        # 공통 요청 래퍼(오류 메시지 포함).
        url = self._url(path)
        try:
            response = requests.request(
                method,
                url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise RuntimeError(f"API 연결 실패: {exc}") from exc

        if response.status_code >= 400:
            detail = _safe_json(response.text)
            raise RuntimeError(f"API 오류 {response.status_code}: {detail}")

        if not response.text:
            return {}
        return response.json()

    def create_tenant(self, name: str, prefix: Optional[str] = None) -> Dict[str, Any]:
        return self._request("POST", "/api/v1/tenants", {"name": name, "project_number_prefix": prefix})

    def create_project(self, project_number: str, project_name: str) -> Dict[str, Any]:
        payload = {"project_number": project_number, "project_name": project_name}
        return self._request("POST", "/api/v1/projects", payload)

    def retry_project_folder(self, project_id: int) -> Dict[str, Any]:
        return self._request("POST", f"/api/v1/projects/{project_id}/folder/retry")

    def get_base_path(self) -> Dict[str, Any]:
        return self._request("GET", "/api/v1/settings/base-path")

    def set_base_path(self, path: Optional[str]) -> Dict[str, Any]:
        return self._request("PUT", "/api/v1/settings/base-path", {"path": path})

    def get_base_path_status(self) -> Dict[str, Any]:
        return self._request("GET", "/api/v1/settings/base-path/status")

    def test_base_path(self, path: str) -> Dict[str, Any]:
        return self._request("POST", "/api/v1/settings/base-path/test", {"path": path})

    def run_diagnostics(self) -> Dict[str, Any]:
        return self._request("GET", "/api/v1/storage/diagnostics")


def _safe_json(text: str) -> str:
    # 응답이 JSON이면 detail만 추출하고 아니면 원문을 반환한다.
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return text
    return str(data.get("detail", data))
