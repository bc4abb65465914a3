import logging

from .board import TaskBoard
from .cli import TaskCLI
from .client import TaskApiClient


def main() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    client = TaskApiClient()
    try:
        TaskCLI(TaskBoard(client)).run()
    finally:
        client.close()


if __name__ == "__main__":
    main()
