"""CommandResult 테스트."""

from __future__ import annotations

from apps.joke_api.application.common.result import CommandResult, ResultStatus


class TestCommandResult:
    """CommandResult 테스트."""

    def test_success(self) -> None:
        result = CommandResult.success()

        assert result.status == ResultStatus.SUCCESS
        assert result.is_success is True
        assert result.should_reject is False
        assert result.message is None

    def test_reject(self) -> None:
        result = CommandResult.reject("bad body")

        assert result.status == ResultStatus.REJECT
        assert result.is_success is False
        assert result.should_reject is True
        assert result.message == "bad body"
