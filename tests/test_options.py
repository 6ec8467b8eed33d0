# tests/test_options.py
import pytest
from pydantic import ValidationError

from dir_listfiles import ConfigurationError, ListOptions
from dir_listfiles.models.options import OPTION_ALIASES, canonicalize_options


@pytest.mark.parametrize(
    "key",
    [
        "only_folder",
        "only_folders",
        "only_dir",
        "only_dirs",
        "only_directories",
        "no_files",
        "onlyFolder",
        "onlyDir",
        "onlyDirs",
        "onlyDirectories",
    ],
)
def test_directory_only_synonyms(key):
    opts = ListOptions.from_mapping({key: 1})
    assert opts.only_directories is True
    assert opts.only_files is False


@pytest.mark.parametrize(
    "key",
    ["no_dir", "no_dirs", "no_directories", "no_folder", "no_folders", "excludeDirectories"],
)
def test_exclude_directory_synonyms(key):
    assert ListOptions.from_mapping({key: 1}).exclude_directories is True


@pytest.mark.parametrize(
    "key", ["no_hidden", "no_hidden_files", "excludeHidden", "excludeHiddenFiles"]
)
def test_exclude_hidden_synonyms(key):
    assert ListOptions.from_mapping({key: True}).exclude_hidden is True


def test_extension_synonyms_and_normalization():
    assert ListOptions.from_mapping({"ext": "TXT"}).extension == "txt"
    assert ListOptions.from_mapping({"extension": ".md"}).extension == "md"
    assert ListOptions(ext="py").extension == "py"


def test_empty_extension_means_no_filter():
    opts = ListOptions.from_mapping({"ext": ""})
    assert opts.extension is None
    assert opts.has_extension_filter is False


def test_non_string_extension_is_rejected():
    with pytest.raises(ConfigurationError):
        ListOptions.from_mapping({"ext": 42})


def test_strip_path_synonyms():
    assert ListOptions.from_mapping({"no_path": 1}).strip_path is True
    assert ListOptions.from_mapping({"stripPath": True}).strip_path is True


def test_unknown_keys_are_ignored():
    opts = ListOptions.from_mapping({"follow_links": 1, "regex": ".*", "only_files": 1})
    assert opts.only_files is True
    assert opts.model_dump() == ListOptions(only_files=True).model_dump()


def test_flags_use_truthiness():
    opts = ListOptions.from_mapping({"only_files": "yes", "no_hidden": 0})
    assert opts.only_files is True
    assert opts.exclude_hidden is False


def test_any_truthy_synonym_sets_flag():
    opts = ListOptions.from_mapping({"only_dir": 0, "only_folders": 1})
    assert opts.only_directories is True


def test_keyword_overrides_win_over_mapping():
    opts = ListOptions.from_mapping({"ext": "txt"}, ext="md")
    assert opts.extension == "md"


def test_keyword_override_can_clear_a_mapping_flag():
    opts = ListOptions.from_mapping({"no_hidden": 1}, exclude_hidden=False)
    assert opts.exclude_hidden is False

    base = ListOptions(ext="md")
    assert ListOptions.coerce(base, ext="txt").extension == "txt"


def test_coerce_accepts_instances_and_mappings():
    base = ListOptions(only_files=True)
    assert ListOptions.coerce(base) is base
    assert ListOptions.coerce(None).model_dump() == ListOptions().model_dump()
    assert ListOptions.coerce({"onlyFiles": 1}) == base
    merged = ListOptions.coerce(base, ext="txt")
    assert merged.model_dump() == ListOptions(only_files=True, ext="txt").model_dump()


def test_coerce_rejects_non_mapping():
    with pytest.raises(ConfigurationError):
        ListOptions.coerce(["only_files"])


def test_options_are_immutable():
    opts = ListOptions()
    with pytest.raises(ValidationError):
        opts.only_files = True


def test_stripped_copy_leaves_original_untouched():
    opts = ListOptions(only_files=True)
    stripped = opts.stripped()
    assert stripped.strip_path is True
    assert stripped.only_files is True
    assert opts.strip_path is False


def test_alias_table_targets_real_fields():
    assert set(OPTION_ALIASES.values()) <= set(ListOptions.model_fields)


def test_canonicalize_keeps_first_extension():
    assert canonicalize_options({"ext": "txt", "extension": "md"}) == {"extension": "txt"}


@pytest.mark.parametrize("value", ["0", "", 0, None, False])
def test_false_like_flag_values(value):
    assert ListOptions.from_mapping({"only_files": value}).only_files is False


@pytest.mark.parametrize("value", ["1", "yes", "00", 1, True])
def test_true_like_flag_values(value):
    assert ListOptions.from_mapping({"only_files": value}).only_files is True


def test_none_override_clears_extension():
    base = ListOptions(ext="md")
    assert ListOptions.coerce(base, ext=None).extension is None
    assert ListOptions.coerce(base, extension="").extension is None
    assert ListOptions.from_mapping({"ext": "md"}, ext=None).extension is None


def test_none_in_mapping_does_not_clear_other_alias():
    assert ListOptions.from_mapping({"ext": None, "extension": "md"}).extension == "md"
