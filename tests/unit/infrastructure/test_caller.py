from __future__ import annotations

import sys

from erroneous.domain.interfaces.caller_resolver import SourceLocation
from erroneous.infrastructure.introspection.caller import capture_caller


def _where() -> SourceLocation | None:
    return capture_caller(1)


def test_skip_zero_resolves_the_calling_function() -> None:
    loc, line = capture_caller(0), sys._getframe().f_lineno

    assert loc == SourceLocation(__file__, line)


def test_skip_one_resolves_the_callers_caller() -> None:
    loc, line = _where(), sys._getframe().f_lineno

    assert loc is not None
    assert loc.file == __file__
    assert loc.line == line


def test_out_of_range_skips_return_none() -> None:
    assert capture_caller(-1) is None
    assert capture_caller(100_000) is None
