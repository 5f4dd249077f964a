from .json_store import dumps_history, loads_history, read_history, write_history

__all__ = ["dumps_history", "loads_history", "read_history", "write_history"]
