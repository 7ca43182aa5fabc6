"""
Pytest configuration for pairnum tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE)
- Shared literals from the worked examples
"""

import os

import pytest
from hypothesis import settings

# print_blob=True makes failures easy to reproduce
settings.register_profile("default", print_blob=True, derandomize=False)
settings.register_profile("ci", print_blob=True, derandomize=True, max_examples=300)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


HOMEWORK = [
    "[[[0,[5,8]],[[1,7],[9,6]]],[[4,[1,2]],[[1,4],2]]]",
    "[[[5,[2,8]],4],[5,[[9,9],0]]]",
    "[6,[[[6,2],[5,6]],[[7,6],[4,7]]]]",
    "[[[6,[0,7]],[0,9]],[4,[9,[9,0]]]]",
    "[[[7,[6,4]],[3,[1,3]]],[[[5,5],1],9]]",
    "[[6,[[7,3],[3,2]]],[[[3,8],[5,7]],4]]",
    "[[[[5,4],[7,7]],8],[[8,3],8]]",
    "[[9,3],[[9,9],[6,[4,9]]]]",
    "[[2,[[7,7],7]],[[5,8],[[9,3],[0,2]]]]",
    "[[[[5,2],5],[8,[3,7]]],[[5,[7,5]],[4,4]]]",
]


@pytest.fixture
def homework_lines():
    return list(HOMEWORK)


@pytest.fixture
def homework_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(HOMEWORK) + "\n", encoding="utf-8")
    return path
