"""任务看板状态测试"""

import httpx

from todo_client.board import TaskBoard

from .fakes import failing_client, responding_client, unreachable_client


class TestTaskBoard:
    """测试看板与服务端状态同步"""

    def test_initial_state_is_loading(self, api):
        board = TaskBoard(api)
        assert board.loading is True
        assert board.tasks == []

    def test_load(self, board):
        assert board.loading is False
        assert board.error is None
        assert [t.id for t in board.tasks] == [1, 2]

    def test_add_task(self, board):
        created = board.add_task("X", "desc")
        assert created.id == 3
        assert board.tasks[-1] == created

    def test_toggle_complete(self, board):
        task = board.find(1)
        board.toggle_complete(task)
        assert board.find(1).completed is True
        # 原对象不被修改
        assert task.completed is False

    def test_delete_task(self, board):
        assert board.delete_task(1) is True
        assert [t.id for t in board.tasks] == [2]

    def test_edit_flow(self, board):
        board.start_edit(board.find(2))
        board.change_edit(title="Ship it")
        updated = board.save_edit()
        assert updated.title == "Ship it"
        assert updated.description == "Complete the API documentation"
        assert board.find(2).title == "Ship it"
        assert board.editing is None

    def test_cancel_edit(self, board):
        board.start_edit(board.find(1))
        board.change_edit(title="Nope")
        board.cancel_edit()
        assert board.editing is None
        assert board.find(1).title == "Buy groceries"

    def test_local_state_mirrors_server(self, board, api):
        board.add_task("X")
        board.toggle_complete(board.find(3))
        board.delete_task(1)
        assert board.tasks == api.list_tasks()


class TestBoardErrors:
    """测试请求失败后看板停止"""

    def test_load_failure(self):
        board = TaskBoard(failing_client())
        board.load()
        assert board.loading is False
        assert board.error == "Failed to fetch tasks"
        assert board.halted

    def test_action_failure_keeps_tasks(self, board):
        board.client = unreachable_client()
        assert board.add_task("X") is None
        assert board.error == "Failed to add task"
        assert [t.id for t in board.tasks] == [1, 2]

    def test_delete_missing_sets_error(self, board):
        assert board.delete_task(99) is False
        assert board.error == "Failed to delete task"

    def test_halted_board_ignores_actions(self, board, api):
        board.error = "Failed to update task"
        assert board.add_task("X") is None
        assert board.delete_task(1) is False
        board.start_edit(board.find(1))
        assert board.editing is None
        assert [t.id for t in api.list_tasks()] == [1, 2]
        assert board.error == "Failed to update task"

    def test_load_non_json_sets_error(self):
        """测试加载时响应不是 JSON"""
        board = TaskBoard(responding_client(httpx.Response(200, text="<html>")))
        board.load()
        assert board.loading is False
        assert board.error == "Failed to fetch tasks"

    def test_add_malformed_task_sets_error(self, board):
        board.client = responding_client(httpx.Response(201, json={"ok": True}))
        assert board.add_task("X") is None
        assert board.error == "Failed to add task"
        assert [t.id for t in board.tasks] == [1, 2]
