from hypothesis import given

from jsxref.base import is_intrinsic_tag_name
from tests.utils import equivalence

from . import strategies


@given(strategies.intrinsic_names)
def test_intrinsic(name: str) -> None:
    assert is_intrinsic_tag_name(name)


@given(strategies.component_names)
def test_component(name: str) -> None:
    assert not is_intrinsic_tag_name(name)


@given(strategies.component_names | strategies.intrinsic_names)
def test_convention(name: str) -> None:
    result = is_intrinsic_tag_name(name)

    assert equivalence(result, name[0].islower() or '-' in name)


def test_examples() -> None:
    assert is_intrinsic_tag_name('div')
    assert is_intrinsic_tag_name('span')
    assert is_intrinsic_tag_name('my-tag')
    assert is_intrinsic_tag_name('Custom-Element')
    assert not is_intrinsic_tag_name('Widget')
    assert not is_intrinsic_tag_name('_Private')
    assert not is_intrinsic_tag_name('$')
