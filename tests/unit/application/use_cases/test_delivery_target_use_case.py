"""DeliveryTargetUseCase 单元测试

测试目标：
1. 列表：过滤、排序、分页参数透传，跳过无法解码的记录，total 独立统计
2. 查询/删除："记录不存在"翻译为 DeliveryTargetNotFoundError
3. 创建：名称冲突（含存在性检查失败）、Project 不存在、namespace 取自 Project
4. 更新：只修改可变字段并整体写回
5. 详情：Project 摘要与集群别名补充失败不影响主流程

测试策略：
- 使用 Mock Store / Mock ProjectService，不依赖真实数据库
"""

from datetime import UTC, datetime
from unittest.mock import Mock

import pytest

from velaapi.application import (
    CreateDeliveryTargetInput,
    DeliveryTargetUseCase,
    UpdateDeliveryTargetInput,
)
from velaapi.domain.entities import Cluster, ClusterTarget, DeliveryTarget, Project
from velaapi.domain.exceptions import (
    DataStoreError,
    DeliveryTargetExistError,
    DeliveryTargetNotFoundError,
    ProjectNotFoundError,
    RecordDecodeError,
    RecordNotExistError,
)
from velaapi.domain.ports import RecordResult, SortOption, SortOrder

# ==================== Fixtures ====================


@pytest.fixture
def target_store():
    store = Mock()
    store.is_exist.return_value = False
    store.list.return_value = []
    store.count.return_value = 0
    return store


@pytest.fixture
def cluster_store():
    store = Mock()
    store.get.return_value = Cluster(name="c1", alias="Cluster One")
    return store


@pytest.fixture
def project_service():
    service = Mock()
    service.get_project.return_value = Project(
        name="proj-a", alias="Project A", namespace="ns-a", description="demo"
    )
    return service


@pytest.fixture
def use_case(target_store, cluster_store, project_service):
    return DeliveryTargetUseCase(
        target_store=target_store,
        cluster_store=cluster_store,
        project_service=project_service,
    )


def make_target(name: str = "t1", **kwargs) -> DeliveryTarget:
    defaults = {
        "alias": "Target One",
        "project": "proj-a",
        "namespace": "ns-a",
        "cluster": ClusterTarget(cluster_name="c1", namespace="prod"),
        "create_time": datetime(2026, 1, 1, tzinfo=UTC),
        "update_time": datetime(2026, 1, 1, tzinfo=UTC),
    }
    defaults.update(kwargs)
    return DeliveryTarget(name=name, **defaults)


# ==================== 测试：list_delivery_targets ====================


class TestListDeliveryTargets:
    def test_list_with_project_filter(self, use_case, target_store):
        """测试：指定 project 时按 project 过滤，按 create_time 倒序分页"""
        target_store.list.return_value = [RecordResult(key="t1", entity=make_target("t1"))]
        target_store.count.return_value = 7

        result = use_case.list_delivery_targets(page=2, page_size=5, project="proj-a")

        filters, options = target_store.list.call_args[0]
        assert filters == {"project": "proj-a"}
        assert options.page == 2
        assert options.page_size == 5
        assert options.sort_by == [SortOption(key="create_time", order=SortOrder.DESCENDING)]
        target_store.count.assert_called_once_with({"project": "proj-a"})

        assert [t.name for t in result.targets] == ["t1"]
        assert result.total == 7, "total 应该是不分页的匹配总数"

    def test_list_without_project_should_not_filter(self, use_case, target_store):
        use_case.list_delivery_targets(page=1, page_size=10)

        filters, _ = target_store.list.call_args[0]
        assert filters == {}
        target_store.count.assert_called_once_with({})

    def test_list_empty_should_return_empty_targets(self, use_case):
        result = use_case.list_delivery_targets(page=1, page_size=10, project="none")

        assert result.targets == []
        assert result.total == 0

    def test_list_should_skip_undecodable_records(self, use_case, target_store):
        """测试：无法解码的记录被跳过，其余记录正常返回"""
        target_store.list.return_value = [
            RecordResult(key="t1", entity=make_target("t1")),
            RecordResult(
                key="broken",
                error=RecordDecodeError("DeliveryTarget", "broken", "'cluster_name'"),
            ),
            RecordResult(key="t2", entity=make_target("t2")),
        ]
        target_store.count.return_value = 3

        result = use_case.list_delivery_targets(page=1, page_size=10)

        assert [t.name for t in result.targets] == ["t1", "t2"]
        assert result.total == 3

    def test_list_store_failure_should_propagate(self, use_case, target_store):
        target_store.list.side_effect = DataStoreError("db down")

        with pytest.raises(DataStoreError):
            use_case.list_delivery_targets(page=1, page_size=10)

    def test_list_items_are_enriched(self, use_case, target_store):
        target_store.list.return_value = [RecordResult(key="t1", entity=make_target("t1"))]

        result = use_case.list_delivery_targets(page=1, page_size=10)

        view = result.targets[0]
        assert view.project.name == "proj-a"
        assert view.cluster_alias == "Cluster One"
        assert view.app_num == 0


# ==================== 测试：get_delivery_target ====================


class TestGetDeliveryTarget:
    def test_get_existing(self, use_case, target_store):
        target = make_target("t1")
        target_store.get.return_value = target

        assert use_case.get_delivery_target("t1") is target
        target_store.get.assert_called_once_with("t1")

    def test_get_missing_should_raise_not_found(self, use_case, target_store):
        target_store.get.side_effect = RecordNotExistError("DeliveryTarget", "t1")

        with pytest.raises(DeliveryTargetNotFoundError) as exc_info:
            use_case.get_delivery_target("t1")

        assert exc_info.value.entity_id == "t1"

    def test_get_other_store_error_should_propagate_unchanged(self, use_case, target_store):
        error = DataStoreError("db down")
        target_store.get.side_effect = error

        with pytest.raises(DataStoreError) as exc_info:
            use_case.get_delivery_target("t1")

        assert exc_info.value is error


# ==================== 测试：create_delivery_target ====================


class TestCreateDeliveryTarget:
    def test_create_success(self, use_case, target_store, project_service):
        """测试：namespace/project 取自 Project，返回补充后的详情"""
        view = use_case.create_delivery_target(
            CreateDeliveryTargetInput(
                name="t1",
                project="proj-a",
                alias="Target One",
                cluster=ClusterTarget(cluster_name="c1"),
                variable={"region": "hz"},
            )
        )

        target_store.is_exist.assert_called_once_with("t1")
        project_service.get_project.assert_any_call("proj-a")
        saved = target_store.add.call_args[0][0]
        assert saved.namespace == "ns-a"
        assert saved.project == "proj-a"
        assert saved.variable == {"region": "hz"}

        assert view.name == "t1"
        assert view.namespace == "ns-a"
        assert view.project.name == "proj-a"
        assert view.project.namespace == "ns-a"
        assert view.app_num == 0
        assert view.cluster.cluster_name == "c1"
        assert view.cluster_alias == "Cluster One"

    def test_create_should_use_project_values_not_request(self, use_case, target_store, project_service):
        """测试：Project 返回的 name 为准（例如大小写规范化后的名称）"""
        project_service.get_project.return_value = Project(name="proj-a", namespace="ns-real")

        use_case.create_delivery_target(CreateDeliveryTargetInput(name="t1", project="proj-a"))

        saved = target_store.add.call_args[0][0]
        assert saved.namespace == "ns-real"

    def test_create_duplicate_name_should_fail(self, use_case, target_store, project_service):
        target_store.is_exist.return_value = True

        with pytest.raises(DeliveryTargetExistError):
            use_case.create_delivery_target(
                CreateDeliveryTargetInput(name="t1", project="proj-a", alias="different")
            )

        project_service.get_project.assert_not_called()
        target_store.add.assert_not_called()

    def test_create_existence_check_failure_is_treated_as_exist(
        self, use_case, target_store, project_service
    ):
        """测试：存在性检查失败时保守地视为已存在"""
        target_store.is_exist.side_effect = DataStoreError("db down")

        with pytest.raises(DeliveryTargetExistError):
            use_case.create_delivery_target(CreateDeliveryTargetInput(name="t1", project="proj-a"))

        project_service.get_project.assert_not_called()
        target_store.add.assert_not_called()

    def test_create_with_missing_project_should_fail_without_write(
        self, use_case, target_store, project_service
    ):
        project_service.get_project.side_effect = ProjectNotFoundError("ghost")

        with pytest.raises(ProjectNotFoundError):
            use_case.create_delivery_target(CreateDeliveryTargetInput(name="t1", project="ghost"))

        target_store.add.assert_not_called()

    def test_create_store_failure_should_propagate(self, use_case, target_store):
        target_store.add.side_effect = DataStoreError("disk full")

        with pytest.raises(DataStoreError):
            use_case.create_delivery_target(CreateDeliveryTargetInput(name="t1", project="proj-a"))


# ==================== 测试：update_delivery_target ====================


class TestUpdateDeliveryTarget:
    def test_update_changes_only_mutable_fields(self, use_case, target_store):
        target = make_target("t1")

        view = use_case.update_delivery_target(
            target,
            UpdateDeliveryTargetInput(
                alias="Renamed",
                description="new desc",
                cluster=ClusterTarget(cluster_name="c2", namespace="staging"),
                variable={"k": "v"},
            ),
        )

        saved = target_store.put.call_args[0][0]
        assert saved.name == "t1"
        assert saved.project == "proj-a"
        assert saved.namespace == "ns-a"
        assert saved.alias == "Renamed"
        assert saved.description == "new desc"
        assert saved.cluster == ClusterTarget(cluster_name="c2", namespace="staging")
        assert saved.variable == {"k": "v"}
        assert view.alias == "Renamed"

    def test_update_without_cluster_should_clear_it(self, use_case, target_store, cluster_store):
        target = make_target("t1")

        view = use_case.update_delivery_target(target, UpdateDeliveryTargetInput(alias="x"))

        assert target_store.put.call_args[0][0].cluster is None
        assert view.cluster is None
        assert view.cluster_alias is None
        cluster_store.get.assert_not_called()

    def test_update_store_failure_should_propagate(self, use_case, target_store):
        target_store.put.side_effect = RecordNotExistError("DeliveryTarget", "t1")

        with pytest.raises(RecordNotExistError):
            use_case.update_delivery_target(make_target("t1"), UpdateDeliveryTargetInput())


# ==================== 测试：delete_delivery_target ====================


class TestDeleteDeliveryTarget:
    def test_delete_existing(self, use_case, target_store):
        use_case.delete_delivery_target("t1")

        target_store.delete.assert_called_once_with("t1")

    def test_delete_missing_should_raise_not_found(self, use_case, target_store):
        target_store.delete.side_effect = RecordNotExistError("DeliveryTarget", "t1")

        with pytest.raises(DeliveryTargetNotFoundError):
            use_case.delete_delivery_target("t1")

    def test_delete_other_error_should_propagate(self, use_case, target_store):
        target_store.delete.side_effect = DataStoreError("db down")

        with pytest.raises(DataStoreError):
            use_case.delete_delivery_target("t1")


# ==================== 测试：detail_delivery_target ====================


class TestDetailDeliveryTarget:
    def test_detail_does_not_touch_store_writes(self, use_case, target_store):
        use_case.detail_delivery_target(make_target("t1"))

        target_store.add.assert_not_called()
        target_store.put.assert_not_called()
        target_store.delete.assert_not_called()

    def test_detail_keeps_times_and_variable(self, use_case):
        target = make_target("t1", variable={"a": 1})

        view = use_case.detail_delivery_target(target)

        assert view.create_time == datetime(2026, 1, 1, tzinfo=UTC)
        assert view.update_time == datetime(2026, 1, 1, tzinfo=UTC)
        assert view.variable == {"a": 1}

    def test_project_lookup_failure_leaves_project_unset(self, use_case, project_service):
        project_service.get_project.side_effect = ProjectNotFoundError("proj-a")

        view = use_case.detail_delivery_target(make_target("t1"))

        assert view.project is None
        assert view.namespace == "ns-a"
        assert view.cluster_alias == "Cluster One"

    def test_cluster_lookup_failure_leaves_alias_unset(self, use_case, cluster_store):
        cluster_store.get.side_effect = RecordNotExistError("Cluster", "c1")

        view = use_case.detail_delivery_target(make_target("t1"))

        assert view.cluster.cluster_name == "c1"
        assert view.cluster_alias is None
        assert view.project is not None

    def test_empty_cluster_name_skips_cluster_lookup(self, use_case, cluster_store):
        view = use_case.detail_delivery_target(make_target("t1", cluster=ClusterTarget(cluster_name="")))

        cluster_store.get.assert_not_called()
        assert view.cluster_alias is None

    def test_app_counter_is_injectable(self, target_store, cluster_store, project_service):
        counter = Mock()
        counter.count_apps.return_value = 3
        use_case = DeliveryTargetUseCase(
            target_store=target_store,
            cluster_store=cluster_store,
            project_service=project_service,
            app_counter=counter,
        )
        target = make_target("t1")

        view = use_case.detail_delivery_target(target)

        assert view.app_num == 3
        counter.count_apps.assert_called_once_with(target)
