"""Run every program under tests/programs and compare its final value.

Each program states its expected result in a `; Expect: <display>` comment.
"""

from pathlib import Path

import pytest

from tatu.interpreter import Interpreter
from tatu.types.value import to_display

PROGRAMS = sorted((Path(__file__).parent / "programs").glob("*.tatu"))
EXPECT_PREFIX = "; Expect: "


def expected_result(path: Path) -> str:
    for line in path.read_text(encoding="utf-8").splitlines():
        if line.startswith(EXPECT_PREFIX):
            return line[len(EXPECT_PREFIX):]
    raise ValueError(f"{path.name} has no Expect line")


@pytest.mark.parametrize("path", PROGRAMS, ids=[p.stem for p in PROGRAMS])
def test_program(path):
    result = Interpreter().eval_file(path)
    assert to_display(result) == expected_result(path)
