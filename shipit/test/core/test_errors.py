from __future__ import annotations

from shipit.core.errors import ErrorCode


def test_values_are_stable() -> None:
    assert int(ErrorCode.OK) == 0
    assert int(ErrorCode.CHECK_FAILED) == 1
    assert int(ErrorCode.USAGE_ERROR) == 2
    assert int(ErrorCode.CONFIG_ERROR) == 3
    assert int(ErrorCode.COMMAND_FAILED) == 4
    assert int(ErrorCode.HOOK_FAILED) == 5
