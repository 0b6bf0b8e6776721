from typing import Protocol

class Transport(Protocol):
    def connect(self, host: str, port: int, server_name: str | None = None, timeout: float | None = None) -> None:
        ...

    def write(self, data: bytes) -> int:
        ...

    def read_into(self, buffer: memoryview) -> int:
        ...

    def close(self) -> None:
        ...
