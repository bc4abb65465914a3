"""终端交互界面：每轮重绘任务列表并解析一条命令。"""
from typing import List

from .board import TaskBoard

CLEAR = "-"


class TaskCLI:
    def __init__(self, board: TaskBoard):
        self.board: TaskBoard = board

    def run(self) -> None:
        """主循环：先加载任务，出错后只显示错误并退出。"""
        self.render()
        self.board.load()
        try:
            while True:
                self.render()
                if self.board.halted:
                    break
                line = input("\n: ").strip()
                if not line:
                    continue
                if line.lower() == 'exit':
                    print("Goodbye.")
                    break
                self.handle_command(line)
        except (KeyboardInterrupt, EOFError):
            print("\nInterrupted. Goodbye.")

    def render(self) -> None:
        if self.board.loading:
            print("Loading...")
            return
        if self.board.error:
            print(f"Error: {self.board.error}")
            return
        print("\nTodo App")
        if not self.board.tasks:
            print("  (no tasks)")
        for task in self.board.tasks:
            mark = "x" if task.completed else " "
            print(f"  [{mark}] {task.id}. {task.title}")
            if task.description:
                print(f"        {task.description}")

    # -------------------- command dispatch --------------------
    def handle_command(self, line: str) -> None:
        tokens = line.split()
        cmd = tokens[0].lower()
        if cmd == 'add':
            self._cmd_add(tokens)
        elif cmd in ('toggle', 'done'):
            self._cmd_toggle(tokens)
        elif cmd == 'edit':
            self._cmd_edit(tokens)
        elif cmd in ('rm', 'delete'):
            self._cmd_rm(tokens)
        elif cmd == 'help':
            self._help()
        else:
            print("Unknown command. Type 'help' for instructions.")

    def _cmd_add(self, tokens: List[str]) -> None:
        title = ' '.join(tokens[1:]).strip() or input("Task title: ").strip()
        if not title:
            print("Title required.")
            return
        description = input("Task description: ").strip()
        self.board.add_task(title, description)

    def _cmd_toggle(self, tokens: List[str]) -> None:
        task = self._lookup(tokens, "toggle <id>")
        if task is not None:
            self.board.toggle_complete(task)

    def _cmd_edit(self, tokens: List[str]) -> None:
        task = self._lookup(tokens, "edit <id>")
        if task is None:
            return
        self.board.start_edit(task)
        # 留空表示保留原值，描述输入 "-" 表示清空
        title = input(f"Title [{task.title}]: ").strip()
        description = input(f"Description [{task.description}] (- to clear): ").strip()
        if description == CLEAR:
            description = ""
        elif not description:
            description = None
        self.board.change_edit(title=title or None, description=description)
        self.board.save_edit()

    def _cmd_rm(self, tokens: List[str]) -> None:
        task = self._lookup(tokens, "rm <id>")
        if task is not None:
            self.board.delete_task(task.id)

    def _lookup(self, tokens: List[str], usage: str):
        if len(tokens) != 2 or not tokens[1].isdigit():
            print(f"Usage: {usage}")
            return None
        task = self.board.find(int(tokens[1]))
        if task is None:
            print("No such task.")
        return task

    def _help(self) -> None:
        print("Commands:")
        print("  add [title...]      Add a new task (prompts for description)")
        print("  toggle <id>         Toggle completion")
        print("  edit <id>           Edit title/description (blank keeps, - clears description)")
        print("  rm <id>             Delete a task")
        print("  help                Show this help")
        print("  exit                Quit")
