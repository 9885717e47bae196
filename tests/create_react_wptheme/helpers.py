from __future__ import annotations

from create_react_wptheme.exec import CommandRequest, CommandResult


class FakeRunner:
    """Command runner that answers by argv prefix and records every request."""

    def __init__(self, responses: dict[tuple[str, ...], object] | None = None) -> None:
        self.responses = dict(responses or {})
        self.requests: list[CommandRequest] = []

    def run(self, request: CommandRequest) -> CommandResult | None:
        self.requests.append(request)
        for prefix in sorted(self.responses, key=len, reverse=True):
            if request.argv[: len(prefix)] != prefix:
                continue
            response = self.responses[prefix]
            if isinstance(response, BaseException):
                raise response
            if callable(response):
                return response(request)
            if response is None or isinstance(response, CommandResult):
                return response
            return ok(request.argv, stdout=str(response))
        return None

    def argvs(self) -> list[tuple[str, ...]]:
        return [request.argv for request in self.requests]


def ok(argv: tuple[str, ...], *, stdout: str = "") -> CommandResult:
    return CommandResult(argv=argv, returncode=0, stdout=stdout)


def failed(argv: tuple[str, ...], returncode: int = 1) -> CommandResult:
    return CommandResult(argv=argv, returncode=returncode)
