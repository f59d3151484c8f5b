from __future__ import annotations


class RunnerError(Exception):
    pass


class TransportError(RunnerError):
    pass


class ProtocolError(RunnerError):
    pass


class UnknownMessageTypeError(ProtocolError):
    def __init__(self, message_type: object) -> None:
        super().__init__(f"unknown message type: {message_type!r}")
        self.message_type = message_type


class MessageDecodeError(ProtocolError):
    def __init__(self, message_type: str, detail: str) -> None:
        super().__init__(f"invalid {message_type} message: {detail}")
        self.message_type = message_type


class UnknownSolverError(ProtocolError):
    def __init__(self, solver_id: int) -> None:
        super().__init__(f"no live solver with solver_id={solver_id}")
        self.solver_id = solver_id


class CapabilityError(RunnerError):
    def __init__(self, operation: str, exc: BaseException) -> None:
        super().__init__(f"{operation} failed: {type(exc).__name__}: {exc}")
        self.operation = operation
