"""DeliveryTargets 路由单元测试

测试目标：
1. 测试 /api/v1/targets 的增删改查
2. 测试请求校验（422）
3. 测试领域异常到状态码的映射（404、400、500）

测试策略：
- 使用内存 SQLite + dependency_overrides 替换数据库会话
- 直接设置 app.state.container（TestClient 不进入 with 块时不会执行 lifespan）
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from velaapi.domain.exceptions import DataStoreError
from velaapi.infrastructure.database.engine import get_db_session
from velaapi.interfaces.api.dependencies import get_delivery_target_use_case
from velaapi.interfaces.api.main import _build_container, app


@pytest.fixture
def client(session_factory):
    def override_session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.state.container = _build_container()
    app.dependency_overrides[get_db_session] = override_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def project(client):
    response = client.post(
        "/api/v1/projects",
        json={"name": "proj-a", "alias": "Project A", "namespace": "ns-a"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def cluster(client):
    response = client.post("/api/v1/clusters", json={"name": "c1", "alias": "Cluster One"})
    assert response.status_code == 201
    return response.json()


def create_target(client, name: str = "t1", **kwargs):
    payload = {"name": name, "project": "proj-a", "alias": "Target One"}
    payload.update(kwargs)
    return client.post("/api/v1/targets", json=payload)


class TestCreateDeliveryTarget:
    def test_create_success(self, client, project, cluster):
        response = create_target(client, cluster={"cluster_name": "c1", "namespace": "prod"})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "t1"
        assert data["namespace"] == "ns-a"
        assert data["project"]["name"] == "proj-a"
        assert data["project"]["namespace"] == "ns-a"
        assert data["app_num"] == 0
        assert data["cluster"] == {"cluster_name": "c1", "namespace": "prod"}
        assert data["cluster_alias"] == "Cluster One"
        assert data["create_time"] is not None

    def test_create_with_unknown_cluster_still_succeeds(self, client, project):
        response = create_target(client, cluster={"cluster_name": "c1"})

        assert response.status_code == 201
        data = response.json()
        assert data["cluster"]["cluster_name"] == "c1"
        assert data["cluster_alias"] is None

    def test_create_duplicate_returns_400(self, client, project):
        assert create_target(client).status_code == 201

        response = create_target(client, alias="something else")

        assert response.status_code == 400
        assert response.headers["X-Error-Code"] == "delivery_target_exist"

    def test_create_with_missing_project_returns_404(self, client):
        response = create_target(client, project="ghost")

        assert response.status_code == 404
        assert response.headers["X-Error-Code"] == "project_not_exist"
        assert client.get("/api/v1/targets/t1").status_code == 404, "失败的创建不应写入数据"

    @pytest.mark.parametrize("name", ["T1", "-t1", "t1-", "t", "t_1", "a" * 33])
    def test_create_with_invalid_name_returns_422(self, client, project, name):
        response = create_target(client, name=name)

        assert response.status_code == 422

    def test_create_without_project_returns_422(self, client):
        response = client.post("/api/v1/targets", json={"name": "t1"})

        assert response.status_code == 422

    def test_create_with_too_long_alias_returns_422(self, client, project):
        response = create_target(client, alias="x" * 65)

        assert response.status_code == 422


class TestGetAndListDeliveryTargets:
    def test_get_detail(self, client, project):
        create_target(client, variable={"region": "hz"})

        response = client.get("/api/v1/targets/t1")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "t1"
        assert data["variable"] == {"region": "hz"}
        assert data["project"]["alias"] == "Project A"

    def test_get_missing_returns_404(self, client):
        response = client.get("/api/v1/targets/ghost")

        assert response.status_code == 404
        assert response.headers["X-Error-Code"] == "delivery_target_not_exist"

    def test_list_filters_by_project(self, client, project):
        client.post("/api/v1/projects", json={"name": "proj-b"})
        create_target(client, name="t1")
        create_target(client, name="t2")
        create_target(client, name="t3", project="proj-b")

        response = client.get("/api/v1/targets", params={"project": "proj-a"})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert {t["name"] for t in data["targets"]} == {"t1", "t2"}

    def test_list_total_is_independent_of_page(self, client, project):
        for i in range(3):
            create_target(client, name=f"t{i}0")

        response = client.get("/api/v1/targets", params={"page": 1, "pageSize": 2})

        data = response.json()
        assert len(data["targets"]) == 2
        assert data["total"] == 3

    def test_list_empty(self, client):
        response = client.get("/api/v1/targets")

        assert response.status_code == 200
        assert response.json() == {"targets": [], "total": 0}


class TestUpdateDeliveryTarget:
    def test_update_changes_mutable_fields_only(self, client, project, cluster):
        create_target(client, cluster={"cluster_name": "c1"}, variable={"a": 1})

        response = client.put(
            "/api/v1/targets/t1",
            json={"alias": "Renamed", "description": "desc", "variable": {"b": 2}},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["alias"] == "Renamed"
        assert data["description"] == "desc"
        assert data["variable"] == {"b": 2}
        assert data["cluster"] is None
        assert data["namespace"] == "ns-a"
        assert data["project"]["name"] == "proj-a"

    def test_update_missing_returns_404(self, client):
        response = client.put("/api/v1/targets/ghost", json={"alias": "x"})

        assert response.status_code == 404


class TestDeleteDeliveryTarget:
    def test_delete_then_get_returns_404(self, client, project):
        create_target(client)

        response = client.delete("/api/v1/targets/t1")

        assert response.status_code == 200
        assert client.get("/api/v1/targets/t1").status_code == 404

    def test_delete_missing_returns_404(self, client):
        response = client.delete("/api/v1/targets/ghost")

        assert response.status_code == 404
        assert response.headers["X-Error-Code"] == "delivery_target_not_exist"


class TestStoreFailure:
    def test_store_error_returns_500(self, client):
        mock_use_case = Mock()
        mock_use_case.list_delivery_targets.side_effect = DataStoreError("db down")
        app.dependency_overrides[get_delivery_target_use_case] = lambda: mock_use_case

        response = client.get("/api/v1/targets")

        assert response.status_code == 500
        assert response.headers["X-Error-Code"] == "internal_error"
        assert response.json()["detail"] == "db down"
