import pytest

from imsctx.errors import InvalidArgumentError
from imsctx.utils.utils import join_path, merge_shallow, validate_plugins


def test_join_path():
    assert join_path('ims', 'contexts', 'cli') == 'ims.contexts.cli'
    assert join_path('ims') == 'ims'


def test_merge_shallow_patch_wins():
    assert merge_shallow({'a': 1, 'b': 2}, {'a': 3, 'c': 4}) == {'a': 3, 'b': 2, 'c': 4}


def test_merge_shallow_is_one_level_deep():
    """Nested mappings are replaced, not merged"""
    assert merge_shallow({'a': {'x': 1}}, {'a': {'y': 2}}) == {'a': {'y': 2}}


def test_merge_shallow_does_not_mutate_inputs():
    existing = {'a': 1}
    patch = {'b': 2}
    merge_shallow(existing, patch)
    assert existing == {'a': 1}
    assert patch == {'b': 2}


@pytest.mark.parametrize('existing', [None, 'scalar', 42, ['a']])
def test_merge_shallow_ignores_non_mapping_existing(existing):
    assert merge_shallow(existing, {'a': 1}) == {'a': 1}


@pytest.mark.parametrize('plugins', [None, [], ['a', 'b'], ('a',)])
def test_validate_plugins_accepts(plugins):
    validate_plugins(plugins)


@pytest.mark.parametrize('plugins', ['a', 45, {'a': 'b'}, ['a', 1], [None]])
def test_validate_plugins_rejects(plugins):
    with pytest.raises(InvalidArgumentError):
        validate_plugins(plugins)
